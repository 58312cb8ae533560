"""Canonical serialization of generator configs.

Saved configs are checked into version control and edited by hand, so output
is deterministic: labels and filters are sorted, keys are sorted, and the
document is indented with a trailing newline.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from projgen.config._defaults import (
    ADDITIONAL_FILE_PATHS_KEY,
    BUILD_TARGETS_KEY,
    PATH_FILTERS_KEY,
    PROJECT_NAME_KEY,
)
from projgen.config._loader import per_user_filename
from projgen.config._settings import default_logger
from projgen.exceptions import SerializationFailed
from projgen.utils._identity import IdentityProvider, get_user_name
from projgen.utils._json import dump_json_pretty

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from projgen.config._models._generator import GeneratorConfig


def config_to_dict(config: GeneratorConfig) -> dict[str, object]:
    """Build the shared config document.

    Args:
        config: The config to serialize.

    Returns:
        Mapping with the project name, sorted build targets, sorted path
        filters, additional file paths (only when set, in their given order)
        and shared-scope options.
    """
    result: dict[str, object] = {
        PROJECT_NAME_KEY: config.project_name,
        BUILD_TARGETS_KEY: sorted(label.value for label in config.build_target_labels),
        PATH_FILTERS_KEY: sorted(config.path_filters),
    }
    if config.additional_file_paths is not None:
        result[ADDITIONAL_FILE_PATHS_KEY] = list(config.additional_file_paths)

    config.options.save_shared_into(result)
    return result


def per_user_settings_to_dict(config: GeneratorConfig) -> dict[str, object]:
    """Build the per-user settings document.

    Returns:
        Mapping holding only per-user-scope options; empty when there are none.
    """
    result: dict[str, object] = {}
    config.options.save_per_user_into(result)
    return result


def _encode(document: dict[str, object]) -> bytes:
    try:
        return dump_json_pretty(document)
    except TypeError as e:
        raise SerializationFailed(str(e)) from e


def serialize_config(config: GeneratorConfig) -> bytes:
    """Encode the shared config document as JSON.

    Raises:
        SerializationFailed: If encoding fails.
    """
    return _encode(config_to_dict(config))


def serialize_per_user_settings(config: GeneratorConfig) -> bytes | None:
    """Encode the per-user settings document as JSON.

    Returns:
        The encoded document, or None when there are no per-user values and
        no file should be written.

    Raises:
        SerializationFailed: If encoding fails.
    """
    document = per_user_settings_to_dict(config)
    if not document:
        return None
    return _encode(document)


def write_generator_config(
    config: GeneratorConfig,
    directory: Path,
    *,
    identity: IdentityProvider = get_user_name,
    logger: FilteringBoundLogger | None = None,
) -> list[Path]:
    """Write a config and, if it has any, its per-user settings to disk.

    The per-user file is left untouched when there is nothing to write.

    Args:
        config: The config to write.
        directory: Directory that receives the files.
        identity: Returns the user name that names the per-user file.
        logger: Optional logger for diagnostics.

    Returns:
        Paths of the files written.

    Raises:
        SerializationFailed: If encoding or writing fails, or the current
            user name cannot be determined.
    """
    if logger is None:
        logger = default_logger()

    outputs: list[tuple[Path, bytes]] = [
        (directory / config.default_filename, serialize_config(config)),
    ]
    per_user_data = serialize_per_user_settings(config)
    if per_user_data is not None:
        try:
            per_user_path = directory / per_user_filename(identity)
        except (OSError, KeyError) as e:
            msg = f"Could not determine the current user name: {e}"
            raise SerializationFailed(msg) from e
        outputs.append((per_user_path, per_user_data))

    written: list[Path] = []
    for path, data in outputs:
        try:
            path.write_bytes(data)
        except OSError as e:
            msg = f"Could not write file at path {path}: {e}"
            raise SerializationFailed(msg, path=path) from e
        written.append(path)
        logger.debug("generator_config_written", path=str(path), size=len(data))

    return written
