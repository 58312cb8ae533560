"""Generator configuration model.

This module provides GeneratorConfig, the immutable description of which
targets, source paths, extra files and options drive project generation.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from projgen.config._defaults import (
    CONFIG_FILE_EXTENSION,
    DEFAULT_PROJECT_NAME,
    PROJECT_FILE_EXTENSION,
    sanitize_filename,
)
from projgen.labels import BuildLabel, RuleInfo
from projgen.options import OptionKey, OptionSet
from projgen.utils._identity import IdentityProvider, get_user_name

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class GeneratorConfig(BaseModel):
    """Configuration that drives generation of an IDE project.

    Instances are immutable. Use load() or from_data() to read a saved
    config, or construct one directly from typed values.

    Attributes:
        project_name: Display name of the generated project.
        build_target_labels: Targets to generate build targets for, in input
            order with duplicates preserved.
        path_filters: Package paths whose sources are included.
        additional_file_paths: Extra files added verbatim, or None for none.
        options: Generator options.
        tool_path: Location of the build tool, or None when no source
            supplied one. Passing a value at construction overrides the
            path recorded in the options.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    build_target_labels: tuple[BuildLabel, ...] = ()
    path_filters: frozenset[str] = frozenset()
    additional_file_paths: tuple[str, ...] | None = None
    options: OptionSet = Field(default_factory=OptionSet)
    tool_path: Path | None = None

    @field_validator("build_target_labels", mode="before")
    @classmethod
    def _coerce_labels(cls, value: Any) -> Any:  # pyright: ignore[reportExplicitAny, reportAny]
        if isinstance(value, Iterable) and not isinstance(value, str):
            return tuple(
                BuildLabel(item) if isinstance(item, str) else item for item in value
            )
        return value

    @model_validator(mode="before")
    @classmethod
    def _resolve_tool_path(cls, data: Any) -> Any:  # pyright: ignore[reportExplicitAny, reportAny]
        # Explicit argument, then the saved option, then unresolved.
        if not isinstance(data, dict) or data.get("tool_path") is not None:
            return data
        options = data.get("options")
        if isinstance(options, OptionSet):
            saved_path = options[OptionKey.BAZEL_PATH].common_value
            if saved_path:
                return {**data, "tool_path": Path(saved_path)}
        return data

    @classmethod
    def from_rule_infos(
        cls,
        *,
        project_name: str,
        build_targets: Iterable[RuleInfo],
        path_filters: Iterable[str],
        additional_file_paths: Iterable[str] | None = None,
        options: OptionSet | None = None,
        tool_path: Path | None = None,
    ) -> Self:
        """Create a config from discovered rules instead of bare labels."""
        return cls(
            project_name=project_name,
            build_target_labels=tuple(rule.label for rule in build_targets),
            path_filters=frozenset(path_filters),
            additional_file_paths=(
                tuple(additional_file_paths)
                if additional_file_paths is not None
                else None
            ),
            options=options if options is not None else OptionSet(),
            tool_path=tool_path,
        )

    @classmethod
    def from_data(
        cls,
        data: bytes,
        additional_option_data: bytes | None = None,
        *,
        tool_path: Path | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> Self:
        """Create a config from the contents of a config file.

        Args:
            data: Contents of the shared config file.
            additional_option_data: Contents of the per-user settings file.
            tool_path: Explicit build tool location.
            logger: Optional logger for diagnostics.

        Returns:
            The decoded configuration.

        Raises:
            DeserializationFailed: If the shared data is not a JSON object.
            FailedToReadAdditionalOptionsData: If the per-user data is
                invalid.
        """
        # Deferred import to avoid circular dependency
        from projgen.config._loader import generator_config_fields  # noqa: PLC0415

        fields = generator_config_fields(data, additional_option_data, logger=logger)
        return cls(**fields, tool_path=tool_path)

    @classmethod
    def load(
        cls,
        input_file: Path,
        *,
        tool_path: Path | None = None,
        identity: IdentityProvider = get_user_name,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> Self:
        """Load a config file and its per-user settings file.

        Args:
            input_file: Path to the shared config file.
            tool_path: Explicit build tool location.
            identity: Returns the user name that names the per-user file.
            logger: Optional logger for diagnostics.

        Returns:
            The loaded configuration.

        Raises:
            BadInputFilePath: If the config file cannot be read.
            FailedToReadAdditionalOptionsData: If the current user name cannot
                be determined, or the per-user file exists but cannot be read
                or is invalid.
            DeserializationFailed: If the config file is not a JSON object.
        """
        # Deferred import to avoid circular dependency
        from projgen.config._loader import read_generator_config_files  # noqa: PLC0415
        from projgen.config._settings import default_logger  # noqa: PLC0415

        if logger is None:
            logger = default_logger()

        data, additional_option_data = read_generator_config_files(
            input_file, identity=identity, logger=logger
        )
        return cls.from_data(
            data, additional_option_data, tool_path=tool_path, logger=logger
        )

    @property
    def default_filename(self) -> str:
        """Return the filename the config is saved under."""
        return sanitize_filename(f"{self.project_name}.{CONFIG_FILE_EXTENSION}")

    @property
    def project_filename(self) -> str:
        """Return the filename of the project generated from this config."""
        return sanitize_filename(f"{self.project_name}.{PROJECT_FILE_EXTENSION}")

    @property
    def tool_path_resolved(self) -> bool:
        """Return True if a build tool location is known."""
        return self.tool_path is not None

    def save(self) -> bytes:
        """Serialize the shared portion of the config.

        Raises:
            SerializationFailed: If encoding fails.
        """
        # Deferred import to avoid circular dependency
        from projgen.config._serializer import serialize_config  # noqa: PLC0415

        return serialize_config(self)

    def save_per_user_settings(self) -> bytes | None:
        """Serialize per-user option values.

        Returns:
            The encoded settings, or None when there is nothing to write.

        Raises:
            SerializationFailed: If encoding fails.
        """
        # Deferred import to avoid circular dependency
        from projgen.config._serializer import serialize_per_user_settings  # noqa: PLC0415

        return serialize_per_user_settings(self)
