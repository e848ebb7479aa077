from __future__ import annotations

import json
from datetime import timedelta

import pytest

from availability import (
    InMemoryNotaryRepository,
    InMemoryOrderRepository,
    InMemoryQualificationRepository,
    NotaryNotFoundError,
    NotaryScheduleService,
    QualificationNotFoundError,
    decode,
)
from conftest import WEDNESDAY_11, order
from models import EditorHourState, HourState, Notary, NotaryDraft, OrderStatus, Qualification, ScheduleFormatError


@pytest.fixture
def service(settings, clock) -> NotaryScheduleService:
    return NotaryScheduleService(
        notaries=InMemoryNotaryRepository(settings),
        orders=InMemoryOrderRepository(),
        qualifications=InMemoryQualificationRepository([
            Qualification(id=1, name="Junior notary", coefficient=1.0),
            Qualification(id=2, name="Senior notary", coefficient=1.5),
        ]),
        settings=settings,
        clock=clock,
    )


def _draft(fio: str = "Anna Petrova", qualification_id: int = 1, schedule=None) -> NotaryDraft:
    if schedule is None:
        schedule = [[1] * 8] * 5 + [[0] * 8] * 2
    return NotaryDraft(
        fio=fio,
        description="Real estate",
        office_address="12 Lenina St",
        qualification_id=qualification_id,
        schedule=schedule,
    )


def test_create_strips_force_markers(service, settings) -> None:
    grid = [[1] * 8] * 7
    grid = [list(row) for row in grid]
    grid[2][2] = 2
    notary_id = service.create_notary(_draft(schedule=grid))

    stored = service.notaries.get(notary_id).schedule
    assert 2 not in sum(json.loads(stored), [])
    assert decode(stored, settings).cell(2, 11) is HourState.ACTIVE


def test_create_logs(service, caplog) -> None:
    caplog.set_level("INFO")
    notary_id = service.create_notary(_draft())
    assert f"Created new notary id={notary_id}" in caplog.text


def test_create_assigns_increasing_ids(service) -> None:
    assert service.create_notary(_draft()) < service.create_notary(_draft(fio="Boris Ivanov"))


def test_create_unknown_qualification(service) -> None:
    with pytest.raises(QualificationNotFoundError):
        service.create_notary(_draft(qualification_id=42))


def test_create_rejects_malformed_schedule(service) -> None:
    with pytest.raises(ScheduleFormatError):
        service.create_notary(_draft(schedule=[[1] * 8] * 3))
    assert service.notaries.all() == []


def test_editor_view_locks_live_orders(service) -> None:
    notary_id = service.create_notary(_draft())
    service.orders.add(order(order_id=1, notary_id=notary_id))
    service.orders.add(order(order_id=2, notary_id=notary_id, at=WEDNESDAY_11.replace(hour=12),
                             status=OrderStatus.CANCELLED))
    service.orders.add(order(order_id=3, notary_id=notary_id, at=WEDNESDAY_11 - timedelta(days=7)))

    view = service.get_notary_for_editing(notary_id)

    assert view.locked_hours() == [(2, 11)]
    assert view.schedule.cell_state(2, 11) is EditorHourState.FORCE_ACTIVE
    assert view.schedule.cell_state(2, 12) is EditorHourState.ACTIVE
    assert view.schedule_grid()[2][2] == 2


def test_editor_round_trip_keeps_stored_schedule(service) -> None:
    notary_id = service.create_notary(_draft())
    service.orders.add(order(notary_id=notary_id))
    before = service.notaries.get(notary_id).schedule

    view = service.get_notary_for_editing(notary_id)
    service.update_notary(notary_id, _draft(schedule=view.schedule_grid()))

    assert service.notaries.get(notary_id).schedule == before


def test_update_replaces_fields_and_schedule(service, settings, caplog) -> None:
    caplog.set_level("INFO")
    notary_id = service.create_notary(_draft())
    service.update_notary(notary_id, _draft(fio="Anna Sidorova", qualification_id=2, schedule=[[0] * 8] * 7))

    notary = service.notaries.get(notary_id)
    assert notary.fio == "Anna Sidorova"
    assert notary.qualification_id == 2
    assert decode(notary.schedule, settings).active_cells() == []
    assert f"Updated notary id={notary_id}" in caplog.text


def test_update_missing_notary(service) -> None:
    with pytest.raises(NotaryNotFoundError):
        service.update_notary(404, _draft())


def test_delete_notary(service) -> None:
    notary_id = service.create_notary(_draft())
    service.delete_notary(notary_id)

    with pytest.raises(NotaryNotFoundError):
        service.get_notary_for_editing(notary_id)
    with pytest.raises(NotaryNotFoundError):
        service.delete_notary(notary_id)


def test_list_notaries_filters(service) -> None:
    service.create_notary(_draft(fio="Anna Petrova", qualification_id=1))
    service.create_notary(_draft(fio="Boris Petrov", qualification_id=2))
    service.create_notary(_draft(fio="Vera Smirnova", qualification_id=2))

    assert [n.fio for n in service.list_notaries(search_fio="PETROV")] == ["Anna Petrova", "Boris Petrov"]
    assert [n.fio for n in service.list_notaries(qualification_id=2)] == ["Boris Petrov", "Vera Smirnova"]
    assert [n.fio for n in service.list_notaries(qualification_id=2, search_fio="vera")] == ["Vera Smirnova"]
    assert service.list_notaries()[0].qualification_name == "Junior notary"


def test_notaries_for_select_carries_coefficient(service) -> None:
    service.create_notary(_draft(qualification_id=2))
    items = service.notaries_for_select()

    assert len(items) == 1
    assert items[0].coefficient == 1.5


def test_repository_refuses_force_active(settings) -> None:
    repo = InMemoryNotaryRepository(settings)
    bad = Notary(id=1, fio="X", qualification_id=1, schedule=json.dumps([[2] * 8] * 7))

    with pytest.raises(ScheduleFormatError):
        repo.save(bad)


def test_repository_seeds_ids_after_existing(settings) -> None:
    seeded = Notary(id=5, fio="X", qualification_id=1, schedule=json.dumps([[0] * 8] * 7))
    repo = InMemoryNotaryRepository(settings, [seeded])
    assert repo.next_id() == 6
