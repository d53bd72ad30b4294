from __future__ import annotations

import pytest

from recordstore.events import EventChannel


def test_publish_delivers_in_subscription_order() -> None:
    channel: EventChannel[int] = EventChannel()
    seen: list[tuple[str, int]] = []

    channel.subscribe(lambda ev: seen.append(("first", ev)))
    channel.subscribe(lambda ev: seen.append(("second", ev)))
    channel.publish(7)

    assert seen == [("first", 7), ("second", 7)]


def test_publish_without_listeners_is_noop() -> None:
    channel: EventChannel[str] = EventChannel()
    channel.publish("nothing")
    assert len(channel) == 0


def test_unsubscribe_is_idempotent_and_leaves_others() -> None:
    channel: EventChannel[int] = EventChannel()
    a: list[int] = []
    b: list[int] = []

    off_a = channel.subscribe(a.append)
    channel.subscribe(b.append)
    off_a()
    off_a()
    channel.publish(1)

    assert a == []
    assert b == [1]
    assert len(channel) == 1


def test_same_listener_subscribed_twice_has_independent_handles() -> None:
    channel: EventChannel[int] = EventChannel()
    seen: list[int] = []

    off_first = channel.subscribe(seen.append)
    channel.subscribe(seen.append)
    channel.publish(1)
    off_first()
    channel.publish(2)

    assert seen == [1, 1, 2]


def test_unsubscribe_during_publish_does_not_affect_current_delivery() -> None:
    channel: EventChannel[int] = EventChannel()
    seen: list[str] = []
    handles: dict[str, object] = {}

    def first(ev: int) -> None:
        seen.append(f"first:{ev}")
        handles["second"]()  # type: ignore[operator]

    channel.subscribe(first)
    handles["second"] = channel.subscribe(lambda ev: seen.append(f"second:{ev}"))

    channel.publish(1)
    channel.publish(2)

    assert seen == ["first:1", "second:1", "first:2"]


def test_subscribe_during_publish_applies_to_next_publish() -> None:
    channel: EventChannel[int] = EventChannel()
    seen: list[str] = []

    def late(ev: int) -> None:
        seen.append(f"late:{ev}")

    def first(ev: int) -> None:
        seen.append(f"first:{ev}")
        if ev == 1:
            channel.subscribe(late)

    channel.subscribe(first)
    channel.publish(1)
    channel.publish(2)

    assert seen == ["first:1", "first:2", "late:2"]


def test_raising_listener_aborts_remaining_delivery() -> None:
    channel: EventChannel[int] = EventChannel()
    seen: list[int] = []

    def boom(ev: int) -> None:
        raise RuntimeError("listener failed")

    channel.subscribe(seen.append)
    channel.subscribe(boom)
    channel.subscribe(seen.append)

    with pytest.raises(RuntimeError, match="listener failed"):
        channel.publish(3)

    assert seen == [3]
