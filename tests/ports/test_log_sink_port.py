from __future__ import annotations

import pytest

from seg_output.observability.domain.events import HandlerEvent, HandlerEventKind
from seg_output.ports.log_sink import LogSink


def test_log_sink_port_default_raises() -> None:
    class _PortOnly(LogSink):
        pass

    port = _PortOnly()  # type: ignore[misc,abstract]
    with pytest.raises(NotImplementedError):
        port.emit(HandlerEvent(kind=HandlerEventKind.OPENED, target="<string>"))
