# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Generator config file reading, decoding and field extraction."""

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from projgen.config._defaults import (
    ADDITIONAL_FILE_PATHS_KEY,
    BUILD_TARGETS_KEY,
    DEFAULT_PROJECT_NAME,
    LEGACY_SOURCE_TARGETS_KEY,
    PATH_FILTERS_KEY,
    PER_USER_FILE_EXTENSION,
    PROJECT_NAME_KEY,
)
from projgen.config._filters import resolve_path_filters
from projgen.config._settings import default_logger
from projgen.exceptions import (
    BadInputFilePath,
    DeserializationFailed,
    FailedToReadAdditionalOptionsData,
    GeneratorConfigError,
)
from projgen.labels import BuildLabel
from projgen.options import OPTION_SET_KEY, OptionSet
from projgen.utils._identity import IdentityProvider, get_user_name
from projgen.utils._json import load_json_object

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from projgen.config._models._generator import GeneratorConfig


def per_user_filename(identity: IdentityProvider = get_user_name) -> str:
    """Return the filename per-user settings are stored under.

    Args:
        identity: Returns the current user name.

    Returns:
        ``<user>.projgen-user``.
    """
    return f"{identity()}.{PER_USER_FILE_EXTENSION}"


def read_generator_config_files(
    input_file: Path,
    *,
    identity: IdentityProvider = get_user_name,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> tuple[bytes, bytes | None]:
    """Read a config file and its sibling per-user settings file.

    Args:
        input_file: Path to the shared config file.
        identity: Returns the user name that names the per-user file.
        logger: Optional logger for diagnostics.

    Returns:
        Tuple of (config data, per-user data). Per-user data is None when the
        per-user file does not exist.

    Raises:
        BadInputFilePath: If the config file cannot be read.
        FailedToReadAdditionalOptionsData: If the current user name cannot be
            determined, or the per-user file exists but cannot be read.
    """
    if logger is None:
        logger = default_logger()

    logger.debug("generator_config_loading", path=str(input_file))
    try:
        data = input_file.read_bytes()
    except OSError as e:
        raise BadInputFilePath(path=input_file) from e

    try:
        per_user_path = input_file.parent / per_user_filename(identity)
    except (OSError, KeyError) as e:
        msg = f"Could not determine the current user name: {e}"
        raise FailedToReadAdditionalOptionsData(msg) from e

    if not per_user_path.exists():
        return data, None

    logger.debug("per_user_overlay_found", path=str(per_user_path))
    try:
        additional_option_data = per_user_path.read_bytes()
    except OSError as e:
        msg = f"Could not read file at path {per_user_path}: {e}"
        raise FailedToReadAdditionalOptionsData(msg, path=per_user_path) from e

    return data, additional_option_data


def decode_config_data(
    data: bytes,
    error_type: type[GeneratorConfigError],
) -> dict[str, object]:
    """Decode config file contents as a JSON object.

    Args:
        data: Raw file contents.
        error_type: Exception raised when the contents are not a JSON object.

    Returns:
        The decoded object.

    Raises:
        GeneratorConfigError: The given error_type, on decode failure.
    """
    try:
        return load_json_object(data)
    except ValueError as e:
        msg = f"Config file contents are invalid: {e}"
        raise error_type(msg) from e


def merge_option_maps(
    shared: Mapping[str, object],
    overlay: Mapping[str, object],
) -> dict[str, object]:
    """Merge per-user option values over shared option values.

    Returns a new dictionary; neither input is modified. Each key present in
    ``overlay`` replaces the whole shared entry for that key.

    Args:
        shared: Option map from the shared config (lower precedence).
        overlay: Option map from the per-user file (higher precedence).

    Returns:
        Merged option map.
    """
    return {**shared, **overlay}


def _extract_string_list(
    container: Mapping[str, object],
    key: str,
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> list[str] | None:
    """Read an array-of-strings value.

    Returns None when the key is missing or the value is not an array.
    Non-string members are skipped with a warning.
    """
    raw = container.get(key)
    if raw is None:
        return None
    if not isinstance(raw, list):
        logger.warning("invalid_config_value", key=key, expected="array of strings")
        return None

    values: list[str] = []
    for index, item in enumerate(raw):
        if isinstance(item, str):
            values.append(item)
        else:
            logger.warning("invalid_config_value", key=key, index=index)
    return values


def _extract_project_name(container: Mapping[str, object]) -> str:
    name = container.get(PROJECT_NAME_KEY)
    if isinstance(name, str) and name:
        return name
    return DEFAULT_PROJECT_NAME


def _extract_path_filters(
    container: Mapping[str, object],
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> frozenset[str]:
    """Read path filters, migrating the deprecated legacy key.

    Precedence:
        1. ``sourceTargets`` (deprecated) when it holds an array. Its entries
           may be labels and are resolved to package paths. ``sourceFilters``
           is ignored for this load.
        2. ``sourceFilters``, already in package path form.
    """
    legacy_entries = _extract_string_list(container, LEGACY_SOURCE_TARGETS_KEY, logger)
    if legacy_entries is not None:
        logger.info(
            "legacy_key_migrated",
            key=LEGACY_SOURCE_TARGETS_KEY,
            replacement=PATH_FILTERS_KEY,
            ignored=PATH_FILTERS_KEY in container,
        )
        return resolve_path_filters(legacy_entries, logger)

    return frozenset(_extract_string_list(container, PATH_FILTERS_KEY, logger) or [])


def _extract_options(
    container: Mapping[str, object],
    additional_container: Mapping[str, object] | None,
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> OptionSet:
    shared = OptionSet.options_from_container(container)
    if shared is None:
        if OPTION_SET_KEY in container:
            logger.warning("invalid_config_value", key=OPTION_SET_KEY, expected="object")
        shared = {}

    if additional_container is None:
        return OptionSet.from_dict(shared, logger)

    overlay = OptionSet.options_from_container(additional_container)
    if overlay is None:
        msg = "Invalid per-user options file"
        raise FailedToReadAdditionalOptionsData(msg)

    return OptionSet.from_dict(merge_option_maps(shared, overlay), logger)


def generator_config_fields(
    data: bytes,
    additional_option_data: bytes | None = None,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Decode config file contents into GeneratorConfig field values.

    Only the shared data supplies fields; per-user data contributes option
    values, which override shared option values key by key.

    Args:
        data: Contents of the shared config file.
        additional_option_data: Contents of the per-user settings file.
        logger: Optional logger for diagnostics.

    Returns:
        Keyword arguments for the GeneratorConfig constructor, excluding
        ``tool_path``.

    Raises:
        DeserializationFailed: If the shared data is not a JSON object.
        FailedToReadAdditionalOptionsData: If the per-user data is not a JSON
            object or has no option map.
    """
    if logger is None:
        logger = default_logger()

    container = decode_config_data(data, DeserializationFailed)
    additional_container = (
        decode_config_data(additional_option_data, FailedToReadAdditionalOptionsData)
        if additional_option_data is not None
        else None
    )

    build_targets = _extract_string_list(container, BUILD_TARGETS_KEY, logger) or []
    additional_file_paths = _extract_string_list(
        container, ADDITIONAL_FILE_PATHS_KEY, logger
    )

    fields: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
        "project_name": _extract_project_name(container),
        "build_target_labels": tuple(BuildLabel(label) for label in build_targets),
        "path_filters": _extract_path_filters(container, logger),
        "additional_file_paths": (
            tuple(additional_file_paths) if additional_file_paths is not None else None
        ),
        "options": _extract_options(container, additional_container, logger),
    }

    logger.debug(
        "generator_config_loaded",
        project_name=fields["project_name"],
        build_targets=len(build_targets),
        per_user=additional_container is not None,
    )
    return fields


def load_generator_config(
    input_file: Path,
    *,
    tool_path: Path | None = None,
    identity: IdentityProvider = get_user_name,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> "GeneratorConfig":  # noqa: UP037
    """Load a generator config and its per-user settings.

    Convenience wrapper around GeneratorConfig.load().
    """
    # Deferred import to avoid circular dependency
    from projgen.config._models._generator import GeneratorConfig  # noqa: PLC0415

    return GeneratorConfig.load(
        input_file, tool_path=tool_path, identity=identity, logger=logger
    )

