"""
Service layer for parolee records.

Records live in a dictionary keyed by identifier.  Identifiers come
from a counter that starts at 1 and is reset by ``clear_all``.  A
single lock makes each operation atomic; there are no multi‑operation
transactions.

Records handed out by the service are copies, so callers cannot alter
stored state except through ``update``.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from rest_lab_api.app.schemas.parolee import Parolee

logger = logging.getLogger(__name__)


class ParoleeService:
    """In‑memory store of parolee records."""

    def __init__(self) -> None:
        self._records: Dict[int, Parolee] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def get(self, parolee_id: int) -> Optional[Parolee]:
        """Return the record with ``parolee_id`` or ``None``."""
        with self._lock:
            record = self._records.get(parolee_id)
        logger.debug("Lookup of parolee %s: %s", parolee_id, "found" if record else "missing")
        return record.model_copy() if record else None

    def list_all(self) -> List[Parolee]:
        """Return every record ordered by identifier."""
        with self._lock:
            records = sorted(self._records.values(), key=lambda r: r.id)
        return [record.model_copy() for record in records]

    def insert(self, parolee: Parolee) -> int:
        """Store a new record and return its assigned identifier.

        Any ``id`` carried by ``parolee`` is ignored.
        """
        with self._lock:
            self._last_id += 1
            new_id = self._last_id
            self._records[new_id] = parolee.model_copy(update={"id": new_id})
        logger.info("Created parolee %s", new_id)
        return new_id

    def update(self, parolee_id: int, fields: Parolee) -> bool:
        """Overwrite the name, gender and date of birth of a record.

        The identifier of the stored record never changes.  Returns
        ``False`` if no record exists for ``parolee_id``.
        """
        with self._lock:
            current = self._records.get(parolee_id)
            if current is None:
                return False
            current.first_name = fields.first_name
            current.last_name = fields.last_name
            current.gender = fields.gender
            current.date_of_birth = fields.date_of_birth
        logger.info("Updated parolee %s", parolee_id)
        return True

    def delete(self, parolee_id: int) -> bool:
        """Remove a record.  Returns ``False`` if it did not exist."""
        with self._lock:
            removed = self._records.pop(parolee_id, None)
        if removed is None:
            return False
        logger.info("Deleted parolee %s", parolee_id)
        return True

    def clear_all(self) -> None:
        """Remove every record and restart identifiers at 1."""
        with self._lock:
            count = len(self._records)
            self._records.clear()
            self._last_id = 0
        logger.info("Cleared %s parolees", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
