from .events import HandlerEvent, HandlerEventKind

__all__ = ["HandlerEvent", "HandlerEventKind"]
