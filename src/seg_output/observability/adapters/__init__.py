from .sinks import JsonlLogSink, StderrLogSink

__all__ = ["JsonlLogSink", "StderrLogSink"]
