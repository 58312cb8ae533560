"""Typed option collection.

This module provides the OptionSet model used by generator configs, along with
the helpers that move raw option maps in and out of config containers.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from projgen.options._definitions import OPTION_SET_KEY, OptionKey, OptionScope
from projgen.options._option import Option
from projgen.utils._logging import create_config_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class OptionSet(BaseModel):
    """Immutable collection of option values.

    Indexing with an OptionKey always returns an Option; unset options come
    back empty so callers can read ``common_value`` without checks.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    options: dict[OptionKey, Option] = Field(default_factory=dict)

    def __getitem__(self, key: OptionKey) -> Option:
        option = self.options.get(key)
        if option is None:
            return Option(key=key)
        return option

    def __contains__(self, key: object) -> bool:
        return isinstance(key, OptionKey) and key in self.options

    @staticmethod
    def options_from_container(
        container: Mapping[str, object],
    ) -> dict[str, object] | None:
        """Extract the raw option map from a config container.

        Args:
            container: A decoded config file.

        Returns:
            A copy of the option map, or None if the container has no option
            map or it is not an object.
        """
        raw = container.get(OPTION_SET_KEY)
        if not isinstance(raw, Mapping):
            return None
        return {str(k): v for k, v in raw.items()}

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, object],
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> Self:
        """Build an option set from a raw option map.

        Unknown keys and malformed entries are skipped with a warning.

        Args:
            data: Raw option map keyed by on-disk option names.
            logger: Optional logger for diagnostics.

        Returns:
            The parsed option set.
        """
        options: dict[OptionKey, Option] = {}

        for name, entry in data.items():
            try:
                key = OptionKey(name)
            except ValueError:
                if logger is None:
                    logger = create_config_logger()
                logger.warning("unknown_option_key", key=name)
                continue

            try:
                option = Option.from_dict(key, entry)
            except ValueError as e:
                if logger is None:
                    logger = create_config_logger()
                logger.warning("invalid_option_entry", key=name, error=str(e))
                continue

            if option.has_values:
                options[key] = option

        return cls(options=options)

    def with_value(
        self,
        key: OptionKey,
        value: str | None,
        *,
        target: str | None = None,
    ) -> Self:
        """Return a copy with one value replaced.

        Args:
            key: The option to change.
            value: The new value, or None to clear it.
            target: Label string to set a per-target value for. The project
                value is changed when omitted.

        Returns:
            A new option set.
        """
        current = self[key]
        if target is None:
            updated = current.model_copy(update={"project_value": value})
        else:
            target_values = dict(current.target_values)
            if value is None:
                target_values.pop(target, None)
            else:
                target_values[target] = value
            updated = current.model_copy(update={"target_values": target_values})

        options = dict(self.options)
        if updated.has_values:
            options[key] = updated
        else:
            options.pop(key, None)
        return type(self)(options=options)

    def to_dict(self, scope: OptionScope | None = None) -> dict[str, object]:
        """Serialize options that carry values.

        Args:
            scope: Restrict output to options of this scope. All options are
                included when None.

        Returns:
            Raw option map keyed by on-disk option names.
        """
        return {
            str(key): option.to_dict()
            for key, option in self.options.items()
            if option.has_values and (scope is None or option.scope == scope)
        }

    def save_shared_into(self, container: dict[str, object]) -> None:
        """Add shared-scope option values to a config container."""
        self._save_into(container, OptionScope.SHARED)

    def save_per_user_into(self, container: dict[str, object]) -> None:
        """Add per-user-scope option values to a config container."""
        self._save_into(container, OptionScope.PER_USER)

    def _save_into(self, container: dict[str, object], scope: OptionScope) -> None:
        values = self.to_dict(scope)
        if values:
            container[OPTION_SET_KEY] = values
