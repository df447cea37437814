from necromatcher.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_a_no_op():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_subscribers_survive_without_other_references():
    bus = EventBus()
    received = []

    class Listener:
        def on_event(self, sender, **kwargs):
            received.append(kwargs["value"])

    bus.subscribe("test", Listener().on_event)
    bus.emit("test", value=7)
    assert received == [7]
