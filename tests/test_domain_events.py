import weakref

from core.events.domain_events import domain_events
from core.events.signal import Signal


def test_domain_event_signal_connect_emit_disconnect():
    seen: list[int] = []

    def _handler(freight_id: int) -> None:
        seen.append(freight_id)

    domain_events.freights_changed.connect(_handler)
    domain_events.freights_changed.emit(1)
    domain_events.freights_changed.disconnect(_handler)
    domain_events.freights_changed.emit(2)

    assert seen == [1]


def test_signal_connect_is_idempotent():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    signal.connect(seen.append)
    signal.connect(seen.append)
    signal.emit("supplier")

    assert seen == ["supplier"]
    assert signal.receivers() == 1


def test_signal_emit_prunes_collected_weakref_listeners():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _Listener:
        def __call__(self, payload: str) -> None:
            seen.append(payload)

    target = _Listener()
    signal.connect(weakref.proxy(target))
    signal.emit("destination")
    del target

    signal.emit("supplier")
    signal.emit("supplier")

    assert seen == ["destination"]
    assert signal.receivers() == 0


def test_signal_emit_keeps_listener_errors_visible():
    signal: Signal[str] = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    try:
        signal.emit("x")
        assert False, "Expected RuntimeError to propagate"
    except RuntimeError as exc:
        assert str(exc) == "boom"
