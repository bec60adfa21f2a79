from arcfill.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", index=3, scale=1.0)

    assert received["index"] == 3
    assert received["scale"] == 1.0


def test_event_bus_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_event_bus_keeps_bound_methods_alive():
    bus = EventBus()
    calls = []

    class Listener:
        def on_event(self, sender, **kwargs):
            calls.append(kwargs)

    bus.subscribe("evt", Listener().on_event)
    bus.emit("evt", value=7)

    assert calls == [{"value": 7}]
