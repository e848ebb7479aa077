"""
Storage collaborators.

The engine never queries storage itself; the service reads and writes through
these protocols. In-memory implementations back the demo script and tests.
"""

from itertools import count
from threading import Lock
from typing import Dict, Iterable, List, Optional, Protocol

from models import Notary, OrderFact, Qualification

from .config import ScheduleSettings
from .grid import decode


class NotaryNotFoundError(LookupError):
    """No notary with the requested id."""


class QualificationNotFoundError(LookupError):
    """No qualification with the requested id."""


class NotaryRepository(Protocol):
    def get(self, notary_id: int) -> Notary: ...
    def all(self) -> List[Notary]: ...
    def next_id(self) -> int: ...
    def save(self, notary: Notary) -> None: ...
    def delete(self, notary_id: int) -> None: ...


class OrderRepository(Protocol):
    def for_notary(self, notary_id: int) -> List[OrderFact]: ...


class QualificationRepository(Protocol):
    def get(self, qualification_id: int) -> Qualification: ...
    def all(self) -> List[Qualification]: ...


class InMemoryNotaryRepository:
    """
    Dict-backed notary store.
    save() decodes the schedule first, so a FORCE_ACTIVE code can never be written.
    Writes are serialized with a lock; the last full-schedule replace wins.
    """

    def __init__(self, settings: ScheduleSettings, notaries: Iterable[Notary] = ()):
        self.settings = settings
        self._rows: Dict[int, Notary] = {}
        self._lock = Lock()
        for notary in notaries:
            self.save(notary)
        self._ids = count(max(self._rows, default=0) + 1)

    def get(self, notary_id: int) -> Notary:
        with self._lock:
            notary = self._rows.get(notary_id)
        if notary is None:
            raise NotaryNotFoundError(f"Notary {notary_id} not found")
        return notary

    def all(self) -> List[Notary]:
        with self._lock:
            return sorted(self._rows.values(), key=lambda n: n.id)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def save(self, notary: Notary) -> None:
        decode(notary.schedule, self.settings)
        with self._lock:
            self._rows[notary.id] = notary

    def delete(self, notary_id: int) -> None:
        with self._lock:
            if self._rows.pop(notary_id, None) is None:
                raise NotaryNotFoundError(f"Notary {notary_id} not found")


class InMemoryOrderRepository:
    """Order facts, returned unfiltered apart from the notary id."""

    def __init__(self, facts: Iterable[OrderFact] = ()):
        self._facts: List[OrderFact] = list(facts)
        self._lock = Lock()

    def add(self, fact: OrderFact) -> None:
        with self._lock:
            self._facts.append(fact)

    def for_notary(self, notary_id: int) -> List[OrderFact]:
        with self._lock:
            return [f for f in self._facts if f.notary_id == notary_id]


class InMemoryQualificationRepository:
    def __init__(self, qualifications: Iterable[Qualification] = ()):
        self._rows: Dict[int, Qualification] = {q.id: q for q in qualifications}

    def get(self, qualification_id: int) -> Qualification:
        qualification: Optional[Qualification] = self._rows.get(qualification_id)
        if qualification is None:
            raise QualificationNotFoundError(f"Qualification {qualification_id} not found")
        return qualification

    def all(self) -> List[Qualification]:
        return sorted(self._rows.values(), key=lambda q: q.id)
