from .cli_config import CLIConfig
from .errors import DecodeError

__all__ = ["CLIConfig", "DecodeError"]
