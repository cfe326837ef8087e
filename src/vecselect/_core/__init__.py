from ._config import Config, config_context, get_config, set_config
from ._main import CommonBase, Pipeable
from ._validation import InvalidArgument, check_non_negative

__all__ = [
    "CommonBase",
    "Config",
    "InvalidArgument",
    "Pipeable",
    "check_non_negative",
    "config_context",
    "get_config",
    "set_config",
]
