"""Generator configuration.

This module provides the public API for loading, merging and saving the
configs that drive IDE project generation.

Example:
    >>> from pathlib import Path
    >>> from projgen.config import GeneratorConfig
    >>> config = GeneratorConfig.load(Path("MyApp.projgen"))
    >>> config.project_filename
    'MyApp.xcodeproj'
"""

# Re-export exceptions from main exceptions module
from projgen.exceptions import (
    BadInputFilePath,
    DeserializationFailed,
    FailedToReadAdditionalOptionsData,
    GeneratorConfigError,
    SerializationFailed,
)

# Defaults and file naming
from ._defaults import (
    CONFIG_FILE_EXTENSION,
    DEFAULT_PROJECT_NAME,
    PER_USER_FILE_EXTENSION,
    PROJECT_FILE_EXTENSION,
    sanitize_filename,
)
from ._filters import resolve_path_filters

# Loader utilities
from ._loader import (
    decode_config_data,
    generator_config_fields,
    load_generator_config,
    merge_option_maps,
    per_user_filename,
    read_generator_config_files,
)
from ._models import GeneratorConfig, LogFormat, LogLevel

# Serialization
from ._serializer import (
    config_to_dict,
    per_user_settings_to_dict,
    serialize_config,
    serialize_per_user_settings,
    write_generator_config,
)
from ._settings import LoaderSettings, default_logger

__all__ = [
    "CONFIG_FILE_EXTENSION",
    "DEFAULT_PROJECT_NAME",
    "PER_USER_FILE_EXTENSION",
    "PROJECT_FILE_EXTENSION",
    "BadInputFilePath",
    "DeserializationFailed",
    "FailedToReadAdditionalOptionsData",
    "GeneratorConfig",
    "GeneratorConfigError",
    "LoaderSettings",
    "LogFormat",
    "LogLevel",
    "SerializationFailed",
    "config_to_dict",
    "decode_config_data",
    "default_logger",
    "generator_config_fields",
    "load_generator_config",
    "merge_option_maps",
    "per_user_filename",
    "per_user_settings_to_dict",
    "read_generator_config_files",
    "resolve_path_filters",
    "sanitize_filename",
    "serialize_config",
    "serialize_per_user_settings",
    "write_generator_config",
]
