"""Write notifications and the channel that delivers them.

Every :meth:`recordstore.store.KeyedStore.set` call is bracketed by one
:class:`BeforeWriteEvent` and one :class:`AfterWriteEvent`, each published
on its own :class:`EventChannel`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")
R = TypeVar("R")

Listener = Callable[[E], None]
Unsubscribe = Callable[[], None]


@dataclass(frozen=True, slots=True)
class BeforeWriteEvent(Generic[R]):
    """Published before the mapping is mutated.

    ``value`` is the record currently stored under the incoming id, or
    ``None`` when the id has never been written.
    """

    value: R | None
    new_value: R


@dataclass(frozen=True, slots=True)
class AfterWriteEvent(Generic[R]):
    """Published after the mapping holds ``value``."""

    value: R


@dataclass(eq=False, slots=True)
class _Registration(Generic[E]):
    """One subscription; identity distinguishes repeated subscriptions of a callable."""

    listener: Listener[E]


class EventChannel(Generic[E]):
    """Synchronous publish/subscribe for a single event type.

    The subscriber list is copy-on-write: ``subscribe`` and unsubscribe
    replace it rather than mutate it, so a publish in progress keeps
    iterating over the list it started with.

    Listener exceptions are not caught. A raising listener aborts delivery
    to the listeners after it and propagates to the publisher.
    """

    def __init__(self) -> None:
        self._registrations: tuple[_Registration[E], ...] = ()

    def __len__(self) -> int:
        return len(self._registrations)

    def subscribe(self, listener: Listener[E]) -> Unsubscribe:
        """Register *listener* and return a handle that removes exactly this registration."""
        registration = _Registration(listener)
        self._registrations = (*self._registrations, registration)

        def unsubscribe() -> None:
            # Idempotent: a second call finds nothing to filter out.
            self._registrations = tuple(r for r in self._registrations if r is not registration)

        return unsubscribe

    def publish(self, event: E) -> None:
        """Invoke every current listener with *event*, in subscription order."""
        for registration in self._registrations:
            registration.listener(event)
