"""In-memory keyed record store.

This is the only component allowed to mutate the record mapping. Each
write is observable through the before/after channels.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from recordstore.events import AfterWriteEvent, BeforeWriteEvent, EventChannel, Listener, Unsubscribe
from recordstore.exceptions import InvalidRecordError

_logger = logging.getLogger(__name__)


class Identified(Protocol):
    @property
    def id(self) -> str: ...


R = TypeVar("R", bound=Identified)


def _record_id(record: object) -> str:
    record_id = getattr(record, "id", None)
    if not isinstance(record_id, str) or not record_id.strip():
        raise InvalidRecordError(f"record has no usable id: {record_id!r}")
    return record_id


class KeyedStore(Generic[R]):
    """Keyed table of records of one type.

    Obtain stores through :class:`recordstore.store.StoreRegistry` (or
    :func:`recordstore.store.get_store`) so that every caller for a record
    type shares one instance and one pair of event channels.

    Traversal order for :meth:`visit` and :meth:`select_best` is the order in
    which ids were first written; overwriting an id keeps its position.
    """

    def __init__(self, record_type: type[R]) -> None:
        self._record_type = record_type
        self._records: dict[str, R] = {}
        self._before_add: EventChannel[BeforeWriteEvent[R]] = EventChannel()
        self._after_add: EventChannel[AfterWriteEvent[R]] = EventChannel()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._record_type.__name__}, records={len(self._records)})"

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    @property
    def record_type(self) -> type[R]:
        return self._record_type

    def set(self, value: R) -> None:
        """Write *value* under ``value.id``, overwriting any previous record.

        Publishes a :class:`BeforeWriteEvent` before the write and an
        :class:`AfterWriteEvent` after it. Listener exceptions propagate; a
        failing after-listener does not undo the write.
        """
        record_id = _record_id(value)
        current = self._records.get(record_id)

        self._before_add.publish(BeforeWriteEvent(value=current, new_value=value))

        self._records[record_id] = value
        _logger.debug(
            "%s record %s id=%s",
            "Replaced" if current is not None else "Added",
            self._record_type.__name__,
            record_id,
        )

        self._after_add.publish(AfterWriteEvent(value=value))

    def get(self, record_id: str) -> R | None:
        return self._records.get(record_id)

    def on_before_add(self, listener: Listener[BeforeWriteEvent[R]]) -> Unsubscribe:
        return self._before_add.subscribe(listener)

    def on_after_add(self, listener: Listener[AfterWriteEvent[R]]) -> Unsubscribe:
        return self._after_add.subscribe(listener)

    def visit(self, visitor: Callable[[R], None]) -> None:
        """Call *visitor* once for every record, in traversal order.

        The traversal runs over a snapshot of the records, so writes made by
        the visitor are not seen by the current traversal.
        """
        for record in list(self._records.values()):
            visitor(record)

    def select_best(self, score_strategy: Callable[[R], float]) -> R | None:
        """Return the record with the highest score.

        The running maximum starts at ``0`` and a record replaces the current
        best when its score is greater than *or equal to* it. Consequently the
        last of several equally scored records wins, and ``None`` is returned
        when the store is empty or every record scores below zero.
        """
        best: R | None = None
        best_score: float = 0
        for record in list(self._records.values()):
            score = score_strategy(record)
            if score >= best_score:
                best_score = score
                best = record
        return best
