import threading
from typing import Dict, List

from fastapi import Request

from string_analyzer.exceptions import DuplicateStringError, StringNotFoundError
from string_analyzer.models import StringRecord
from string_analyzer.utils import compute_identity


class RecordStore:
    """
    In-memory container of analyzed strings keyed by their SHA-256 id.

    Every access to the mapping goes through one lock, so the duplicate
    check and the insert in ``create`` cannot interleave with another
    writer, and ``get_all`` always copies a consistent view.
    """

    def __init__(self) -> None:
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._records

    def create(self, record: StringRecord) -> StringRecord:
        """Insert a record, rejecting an id that is already stored"""
        with self._lock:
            if record.id in self._records:
                raise DuplicateStringError(record.id)
            self._records[record.id] = record
            return record

    def get_by_id(self, identity: str) -> StringRecord:
        """Get a record by its SHA-256 id"""
        with self._lock:
            record = self._records.get(identity)
        if record is None:
            raise StringNotFoundError(identity)
        return record

    def get_by_value(self, raw: str) -> StringRecord:
        """Get a record by value (trimmed before hashing)"""
        return self.get_by_id(compute_identity(raw))

    def get_all(self) -> List[StringRecord]:
        """Snapshot of every stored record, in insertion order"""
        with self._lock:
            return list(self._records.values())

    def delete(self, raw: str) -> bool:
        """Delete a record by value, False if it was not stored"""
        identity = compute_identity(raw)
        with self._lock:
            return self._records.pop(identity, None) is not None


def get_store(request: Request) -> RecordStore:
    """Dependency to provide the application's record store."""
    return request.app.state.store
