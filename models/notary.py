"""
Notary records and the view models built from them.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from .schedule import Cell, EditableSchedule


class Qualification(BaseModel):
    """Qualification level; the coefficient scales consultation prices."""
    id: int
    name: str = Field(min_length=1)
    coefficient: float = Field(gt=0)


class Notary(BaseModel):
    """
    Persisted notary record.
    The schedule is kept in its encoded form, exactly as storage holds it.
    """
    id: int
    fio: str = Field(min_length=1, description="Full name")
    description: str = Field(default="")
    office_address: str = Field(default="")
    qualification_id: int
    schedule: str = Field(description="Encoded weekly schedule (JSON array of arrays)")


class NotaryDraft(BaseModel):
    """
    Notary data submitted from the editor.
    `schedule` is the raw editor grid and may still carry FORCE_ACTIVE codes.
    """
    fio: str = Field(min_length=1)
    description: str = Field(default="")
    office_address: str = Field(default="")
    qualification_id: int
    schedule: Any = Field(description="Editor grid: 7 rows of 0/1/2 codes, or a JSON string of it")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "fio": "Anna Petrova",
            "description": "Real estate transactions",
            "office_address": "12 Lenina St, office 4",
            "qualification_id": 1,
            "schedule": [[1, 1, 2, 1, 1, 0, 0, 0]] * 5 + [[0] * 8] * 2
        }
    })


# --- View Models ---

class NotarySummary(BaseModel):
    id: int
    fio: str
    description: str
    office_address: str
    qualification_name: str


class NotarySelectItem(BaseModel):
    id: int
    fio: str
    coefficient: float


class NotaryEditorView(BaseModel):
    """Everything the edit form needs, with booked hours locked."""
    fio: str
    description: str
    office_address: str
    qualification_id: int
    schedule: EditableSchedule

    def schedule_grid(self) -> List[List[int]]:
        return self.schedule.to_editor_grid()

    def locked_hours(self) -> List[Cell]:
        return sorted(self.schedule.forced)
