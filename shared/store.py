import logging
from typing import Callable, Generic, Iterable, TypeVar

from .locking import ReadWriteLock

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Append-only record list, newest first.

    Records must carry a numeric string ``id``. The id counter starts
    above the highest seeded id and is only advanced under the write lock.
    """

    def __init__(self, seed: Iterable[R] = ()):
        self._lock = ReadWriteLock()
        self._records: list[R] = list(seed)
        self._next_id = max((int(r.id) for r in self._records), default=0) + 1

    def list(self) -> list[R]:
        with self._lock.read():
            return list(self._records)

    def _prepend(self, build: Callable[[str], R]) -> R:
        with self._lock.write():
            record = build(str(self._next_id))
            self._next_id += 1
            self._records.insert(0, record)
        logger.debug("Stored %s %s", type(record).__name__, record.id)
        return record

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)
