from .defaults import default_gate
from .loader import find_config, load_gate, resolve_gate
from .types import CheckConfig, ConfigError, GateConfig, UnsupportedConfigFormatError

__all__ = [
    "load_gate",
    "find_config",
    "resolve_gate",
    "default_gate",
    "GateConfig",
    "CheckConfig",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
