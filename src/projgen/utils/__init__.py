"""Shared utilities."""

from ._identity import IdentityProvider, get_user_name
from ._json import dump_json_pretty, load_json_object
from ._logging import LogFormatType, create_config_logger

__all__ = [
    "IdentityProvider",
    "LogFormatType",
    "create_config_logger",
    "dump_json_pretty",
    "get_user_name",
    "load_json_object",
]
