from .log_sink import LogSink
from .output_handler import OutputHandler
from .program_state import ProgramStateListener

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "LogSink",
    "OutputHandler",
    "ProgramStateListener",
]
