from .charset import resolve_charset
from .factory import create_default, create_from_file, create_handler, create_output_to_string
from .registry import AdapterRegistry, AdapterRegistryError
from .string_handler import StringOutputHandler
from .writer_handler import WriterOutputHandler

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "AdapterRegistry",
    "AdapterRegistryError",
    "StringOutputHandler",
    "WriterOutputHandler",
    "create_default",
    "create_from_file",
    "create_handler",
    "create_output_to_string",
    "resolve_charset",
]
