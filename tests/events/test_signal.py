import pytest
from unittest.mock import MagicMock
from revertible.events import NotificationSink, Signal

def test_signal_event():
    """Verify Signal behavior."""
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1

def test_signal_connect_once():
    sig = Signal()
    handler = MagicMock()

    assert sig.connect(handler) is True
    assert sig.connect(handler) is False
    sig.emit(1)

    handler.assert_called_once_with(1)
    assert sig.subscribers == (handler,)

def test_signal_disconnect_all():
    sig = Signal("s")
    handlers = [MagicMock(), MagicMock()]
    for h in handlers:
        sig.connect(h)

    sig.disconnect_all()
    sig.emit("x")

    assert len(sig) == 0
    for h in handlers:
        h.assert_not_called()

def test_signal_subscriber_error_does_not_stop_others():
    sig = Signal("s")
    after = MagicMock()
    sig.connect(MagicMock(side_effect=RuntimeError("fail")))
    sig.connect(after)

    sig.emit("x")

    after.assert_called_once_with("x")

def test_signal_is_notification_sink():
    assert isinstance(Signal(), NotificationSink)
