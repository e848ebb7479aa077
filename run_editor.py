"""
Main Execution Script for the Notary Schedule engine.
Walks one notary through the edit cycle: load -> lock booked hours -> edit -> strip -> store.
"""

import os
import sys
import logging
from datetime import datetime, timedelta
import json

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from availability import (
    InMemoryNotaryRepository,
    InMemoryOrderRepository,
    InMemoryQualificationRepository,
    NotaryScheduleService,
    ScheduleSettings,
    SystemClock,
    decode,
)
from models import HourState, NotaryDraft, OrderFact, OrderStatus, Qualification, Schedule
from models.schedule import DAY_NAMES

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")

# --- CONFIGURATION ---
DATA_FILENAME = "demo_data.json"
EXPORT_FILENAME = "editor_data.json"
# ---------------------


def load_demo_data(filename: str):
    """
    Load qualifications and orders from JSON and rebuild the pydantic objects.
    Returns (None, None) when the file is missing or unreadable.
    """
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        logger.warning(f"Data file {filename} not found or invalid. Using built-in sample.")
        return None, None

    qualifications = [Qualification(**item) for item in data.get('qualifications', [])]
    orders = [OrderFact(**item) for item in data.get('orders', [])]
    logger.info(f"Loaded {len(qualifications)} qualifications, {len(orders)} orders from {filename}")
    return qualifications, orders


def build_sample_data(settings: ScheduleSettings, now: datetime):
    """Working week fully offered, weekend off, three orders of which one is live."""
    qualifications = [
        Qualification(id=1, name="Junior notary", coefficient=1.0),
        Qualification(id=2, name="Senior notary", coefficient=1.5),
    ]

    local_now = now.astimezone(settings.tz)
    next_wednesday = (local_now + timedelta(days=(2 - local_now.weekday()) % 7 or 7)).date()
    eleven = datetime(next_wednesday.year, next_wednesday.month, next_wednesday.day, 11, tzinfo=settings.tz)

    orders = [
        OrderFact(order_id=1, notary_id=1, consultation_at=eleven, status=OrderStatus.PROCESSING),
        OrderFact(order_id=2, notary_id=1, consultation_at=eleven + timedelta(hours=2), status=OrderStatus.CANCELLED),
        OrderFact(order_id=3, notary_id=1, consultation_at=eleven - timedelta(days=7), status=OrderStatus.PROCESSING),
    ]
    return qualifications, orders


def working_week(settings: ScheduleSettings) -> Schedule:
    schedule = Schedule.empty(settings.min_hour, settings.hours_per_day)
    for day in range(5):
        for hour in range(settings.min_hour, settings.end_hour):
            schedule = schedule.with_cell(day, hour, HourState.ACTIVE)
    return schedule


def print_grid(title: str, grid, settings: ScheduleSettings):
    marks = {0: ".", 1: "o", 2: "#"}
    print(f"\n{title}")
    print("     " + " ".join(f"{h:02d}" for h in range(settings.min_hour, settings.end_hour)))
    for name, row in zip(DAY_NAMES, grid):
        print(f"{name}  " + " ".join(f" {marks[c]}" for c in row))


def export_editor_data(view, filename: str):
    """Serialize the editor view for a frontend."""
    data = {
        "fio": view.fio,
        "qualification_id": view.qualification_id,
        "schedule": view.schedule_grid(),
        "locked": [list(cell) for cell in view.locked_hours()],
        "computed_at": view.schedule.computed_at.isoformat() if view.schedule.computed_at else None,
    }
    with open(filename, 'w') as f:
        json.dump(data, f, indent=2)
    logger.info(f"Exported editor data to {filename}")


def main():
    settings = ScheduleSettings.from_env()
    clock = SystemClock()
    logger.info(f"Starting Notary Schedule demo (hours {settings.min_hour}-{settings.end_hour}, {settings.timezone})")

    # --- PHASE 1: DATA ---
    qualifications, orders = load_demo_data(DATA_FILENAME)
    if not qualifications:
        qualifications, orders = build_sample_data(settings, clock.now())

    service = NotaryScheduleService(
        notaries=InMemoryNotaryRepository(settings),
        orders=InMemoryOrderRepository(orders),
        qualifications=InMemoryQualificationRepository(qualifications),
        settings=settings,
        clock=clock
    )

    notary_id = service.create_notary(NotaryDraft(
        fio="Anna Petrova",
        description="Real estate and inheritance",
        office_address="12 Lenina St, office 4",
        qualification_id=qualifications[0].id,
        schedule=working_week(settings).codes()
    ))

    # --- PHASE 2: READ PATH ---
    view = service.get_notary_for_editing(notary_id)
    print_grid("EDITOR VIEW (# = booked, locked)", view.schedule_grid(), settings)

    # --- PHASE 3: WRITE PATH ---
    # The editor turns Friday off entirely and submits its grid, locked cells included
    submitted = view.schedule_grid()
    submitted[4] = [0] * settings.hours_per_day
    service.update_notary(notary_id, NotaryDraft(
        fio=view.fio,
        description=view.description,
        office_address=view.office_address,
        qualification_id=view.qualification_id,
        schedule=submitted
    ))

    stored = decode(service.notaries.get(notary_id).schedule, settings)
    print_grid("STORED SCHEDULE", stored.codes(), settings)

    # --- PHASE 4: REPORT & EXPORT ---
    print("\n" + "=" * 50)
    print("NOTARIES")
    print("=" * 50)
    for item in service.notaries_for_select():
        print(f"{item.id}: {item.fio} (x{item.coefficient})")

    export_editor_data(service.get_notary_for_editing(notary_id), EXPORT_FILENAME)


if __name__ == "__main__":
    main()
