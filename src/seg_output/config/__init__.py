from .loader import ConfigError, load_output_config
from .models import LineFormatConfig, LogConfig, OutputConfig

# Config exports are intentionally small.
__all__ = ["ConfigError", "LineFormatConfig", "LogConfig", "OutputConfig", "load_output_config"]
