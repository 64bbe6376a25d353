from .cli import main
from .config_loader import ConfigLoader, load_config
from .config_model import EMPTY, EditorConfigFile
from .config_parser import RESERVED_KEYS, RESERVED_VALUES, parse_lines, parse_text

__all__ = [
    "EMPTY",
    "ConfigLoader",
    "EditorConfigFile",
    "RESERVED_KEYS",
    "RESERVED_VALUES",
    "load_config",
    "main",
    "parse_lines",
    "parse_text",
]
