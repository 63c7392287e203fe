from game.event_bus import EventBus


def test_emit_calls_subscribers_in_order():
    bus = EventBus()
    calls = []
    bus.subscribe("ping", lambda *a, **k: calls.append(("first", a, k)))
    bus.subscribe("ping", lambda *a, **k: calls.append(("second", a, k)))
    bus.emit("ping", 1, flag=True)
    assert calls == [("first", (1,), {"flag": True}), ("second", (1,), {"flag": True})]


def test_unknown_event_is_noop():
    EventBus().emit("nobody-listens", 42)


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    seen = []
    bus.subscribe("edit", seen.append)
    bus.emit("edit", 1)
    bus.unsubscribe("edit", seen.append)
    bus.emit("edit", 2)
    assert seen == [1]
    # Unknown callbacks are ignored.
    bus.unsubscribe("edit", print)


def test_handler_may_unsubscribe_during_emit():
    bus = EventBus()
    seen = []

    def once(value):
        seen.append(value)
        bus.unsubscribe("tick", once)

    bus.subscribe("tick", once)
    bus.subscribe("tick", seen.append)
    bus.emit("tick", "a")
    bus.emit("tick", "b")
    assert seen == ["a", "a", "b"]
