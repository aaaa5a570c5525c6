from .adapters.sinks import JsonlLogSink, StderrLogSink
from .domain.events import HandlerEvent, HandlerEventKind

__all__ = ["HandlerEvent", "HandlerEventKind", "JsonlLogSink", "StderrLogSink"]
