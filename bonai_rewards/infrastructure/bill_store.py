"""In-memory observable store of credit card bills"""

import logging
from typing import Callable, Iterable, List, Tuple

from bonai_rewards.domain.models import BillRecord

logger = logging.getLogger(__name__)

Subscriber = Callable[[], None]


class BillCollection:
    """
    Ordered bill records with synchronous change notification.

    Every mutation notifies all subscribers before it returns. A subscriber
    that raises is logged and skipped so the rest still hear about it.
    """

    def __init__(self, records: Iterable[BillRecord] = ()):
        self._records: Tuple[BillRecord, ...] = tuple(records)
        self._subscribers: List[Subscriber] = []

    def list(self) -> Tuple[BillRecord, ...]:
        """Read-only snapshot in insertion order"""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def replace(self, records: Iterable[BillRecord]) -> None:
        """Swap in a new item set and notify subscribers"""
        self._records = tuple(records)
        logger.info("Bill collection replaced", extra={"bill_count": len(self._records)})
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback()
            except Exception:
                logger.exception("Bill collection subscriber failed")
