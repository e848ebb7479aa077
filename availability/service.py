"""
Notary schedule service.

Glue between storage and the conflict projector:
- every write strips locked hours before the schedule reaches storage,
- every edit read overlays the notary's live orders fresh from the order store.
"""

import logging
from typing import List, Optional

from models import (
    Notary,
    NotaryDraft,
    NotaryEditorView,
    NotarySelectItem,
    NotarySummary,
)

from .clock import Clock, SystemClock
from .config import ScheduleSettings
from .grid import decode, encode
from .projector import for_editing, for_storage
from .repository import NotaryRepository, OrderRepository, QualificationRepository

logger = logging.getLogger(__name__)


class NotaryScheduleService:
    """
    Create, edit and list notaries while keeping their schedules storable.
    """

    def __init__(
        self,
        notaries: NotaryRepository,
        orders: OrderRepository,
        qualifications: QualificationRepository,
        settings: Optional[ScheduleSettings] = None,
        clock: Optional[Clock] = None
    ):
        self.notaries = notaries
        self.orders = orders
        self.qualifications = qualifications
        self.settings = settings or ScheduleSettings()
        self.clock = clock or SystemClock()

    def _storable_schedule(self, draft: NotaryDraft) -> str:
        return encode(for_storage(draft.schedule, self.settings))

    # --- Write Path ---

    def create_notary(self, draft: NotaryDraft) -> int:
        """Persist a new notary. Returns its id."""
        schedule = self._storable_schedule(draft)
        self.qualifications.get(draft.qualification_id)

        notary = Notary(
            id=self.notaries.next_id(),
            fio=draft.fio,
            description=draft.description,
            office_address=draft.office_address,
            qualification_id=draft.qualification_id,
            schedule=schedule
        )
        self.notaries.save(notary)
        logger.info(f"Created new notary id={notary.id} fio={notary.fio!r}")
        return notary.id

    def update_notary(self, notary_id: int, draft: NotaryDraft) -> None:
        """
        Replace a notary's fields and its whole schedule.
        Locked hours in the submission are stored as plain ACTIVE; live orders are not re-checked.
        """
        schedule = self._storable_schedule(draft)
        current = self.notaries.get(notary_id)
        self.qualifications.get(draft.qualification_id)

        updated = current.model_copy(update={
            "fio": draft.fio,
            "description": draft.description,
            "office_address": draft.office_address,
            "qualification_id": draft.qualification_id,
            "schedule": schedule,
        })
        self.notaries.save(updated)
        logger.info(f"Updated notary id={notary_id} fio={updated.fio!r}")

    def delete_notary(self, notary_id: int) -> None:
        self.notaries.delete(notary_id)
        logger.info(f"Deleted notary id={notary_id}")

    # --- Read Path ---

    def get_notary_for_editing(self, notary_id: int) -> NotaryEditorView:
        """Load a notary with every hour held by a live order locked."""
        notary = self.notaries.get(notary_id)
        stored = decode(notary.schedule, self.settings)
        editable = for_editing(
            stored,
            self.orders.for_notary(notary_id),
            notary_id=notary_id,
            clock=self.clock,
            settings=self.settings
        )
        logger.debug(f"Notary {notary_id}: {len(editable.forced)} locked hours")
        return NotaryEditorView(
            fio=notary.fio,
            description=notary.description,
            office_address=notary.office_address,
            qualification_id=notary.qualification_id,
            schedule=editable
        )

    def list_notaries(
        self,
        qualification_id: Optional[int] = None,
        search_fio: Optional[str] = None
    ) -> List[NotarySummary]:
        """All notaries, optionally narrowed by qualification and a case-insensitive name fragment."""
        notaries = self.notaries.all()
        if qualification_id is not None:
            notaries = [n for n in notaries if n.qualification_id == qualification_id]
        if search_fio:
            needle = search_fio.lower()
            notaries = [n for n in notaries if needle in n.fio.lower()]

        return [
            NotarySummary(
                id=n.id,
                fio=n.fio,
                description=n.description,
                office_address=n.office_address,
                qualification_name=self.qualifications.get(n.qualification_id).name
            )
            for n in notaries
        ]

    def notaries_for_select(self) -> List[NotarySelectItem]:
        return [
            NotarySelectItem(
                id=n.id,
                fio=n.fio,
                coefficient=self.qualifications.get(n.qualification_id).coefficient
            )
            for n in self.notaries.all()
        ]
