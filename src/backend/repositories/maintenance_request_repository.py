"""
MaintenanceRequest repository backed by an in-memory list.

The list keeps submission order (newest first for created requests).
Records are replaced wholesale; nothing is ever deleted.
"""
import logging
from typing import Iterable, List, Optional

from models.maintenance_request import MaintenanceRequest

logger = logging.getLogger(__name__)


class MaintenanceRequestRepository:
    """In-memory store for maintenance requests, keyed by request id."""

    def __init__(self, records: Optional[Iterable[MaintenanceRequest]] = None):
        self._records: List[MaintenanceRequest] = []
        if records:
            self.seed(records)

    def __len__(self) -> int:
        return len(self._records)

    def seed(self, records: Iterable[MaintenanceRequest]) -> None:
        """
        Replace the whole collection.

        Raises:
            ValueError: If two records share an id
        """
        records = list(records)
        ids = [r.id for r in records]
        if len(ids) != len(set(ids)):
            raise ValueError("Maintenance request ids must be unique")

        self._records = records
        logger.info(f"Maintenance request store seeded with {len(records)} record(s)")

    def list_all(self) -> List[MaintenanceRequest]:
        """Snapshot of all records in store order."""
        return list(self._records)

    def find_by_id(self, request_id: str) -> Optional[MaintenanceRequest]:
        for record in self._records:
            if record.id == request_id:
                return record
        return None

    def add(self, record: MaintenanceRequest) -> MaintenanceRequest:
        """
        Prepend a new record.

        Raises:
            ValueError: If the id is already taken
        """
        if self.find_by_id(record.id) is not None:
            raise ValueError(f"Maintenance request {record.id} already exists")

        self._records = [record, *self._records]
        return record

    def replace(self, record: MaintenanceRequest) -> bool:
        """
        Swap in ``record`` for the stored record with the same id.

        Returns:
            False if no record has that id
        """
        replaced = False
        updated = []
        for existing in self._records:
            if existing.id == record.id:
                updated.append(record)
                replaced = True
            else:
                updated.append(existing)

        if replaced:
            self._records = updated
        return replaced

    def next_id(self) -> str:
        """Id for the next submitted request: M-<count + 1001>, skipping taken ids."""
        number = len(self._records) + 1001
        while self.find_by_id(f"M-{number:04d}") is not None:
            number += 1
        return f"M-{number:04d}"

    def unique_properties(self) -> List[str]:
        """Distinct property names in first-seen order."""
        return list(dict.fromkeys(r.property for r in self._records))
