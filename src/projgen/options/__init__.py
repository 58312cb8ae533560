"""Generator options.

This module provides the option schema and the typed option collection that
generator configs carry.

Example:
    >>> from projgen.options import OptionKey, OptionSet
    >>> options = OptionSet().with_value(OptionKey.BAZEL_PATH, "/usr/bin/bazel")
    >>> options[OptionKey.BAZEL_PATH].common_value
    '/usr/bin/bazel'
"""

from ._definitions import (
    BOOL_FALSE,
    BOOL_TRUE,
    OPTION_DEFINITIONS,
    OPTION_SET_KEY,
    OptionDefinition,
    OptionKey,
    OptionScope,
    OptionValueType,
)
from ._option import Option
from ._option_set import OptionSet

__all__ = [
    "BOOL_FALSE",
    "BOOL_TRUE",
    "OPTION_DEFINITIONS",
    "OPTION_SET_KEY",
    "Option",
    "OptionDefinition",
    "OptionKey",
    "OptionScope",
    "OptionSet",
    "OptionValueType",
]
