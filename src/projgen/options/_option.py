"""Single option values.

An option carries an optional project-wide value plus per-target overrides.
On disk an option is stored as ``{"p": <project value>, "t": {<label>: <value>}}``
with either member omitted when unset.
"""

from collections.abc import Mapping
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from projgen.options._definitions import (
    BOOL_FALSE,
    BOOL_TRUE,
    OPTION_DEFINITIONS,
    OptionDefinition,
    OptionKey,
    OptionScope,
    OptionValueType,
)

_PROJECT_VALUE_KEY = "p"
_TARGET_VALUES_KEY = "t"


def _coerce_value(value: object, value_type: OptionValueType) -> str:
    """Normalize a raw JSON value to the option's string form.

    Raises:
        ValueError: If the value cannot be represented for this option type.
    """
    if isinstance(value, bool):
        if value_type is not OptionValueType.BOOLEAN:
            msg = f"Boolean value not allowed for {value_type} option"
            raise ValueError(msg)
        return BOOL_TRUE if value else BOOL_FALSE
    if isinstance(value, str):
        return value
    msg = f"Expected a string value, got {type(value).__name__}"
    raise ValueError(msg)


class Option(BaseModel):
    """Value of a single option.

    Attributes:
        key: The option key.
        project_value: Project-wide value, or None when unset.
        target_values: Per-target overrides keyed by label string.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    key: OptionKey
    project_value: str | None = None
    target_values: dict[str, str] = Field(default_factory=dict)

    @property
    def definition(self) -> OptionDefinition:
        """Return the schema entry for this option."""
        return OPTION_DEFINITIONS[self.key]

    @property
    def scope(self) -> OptionScope:
        """Return the scope this option is persisted in."""
        return self.definition.scope

    @property
    def has_values(self) -> bool:
        """Return True if the project or any target sets a value."""
        return self.project_value is not None or bool(self.target_values)

    @property
    def common_value(self) -> str | None:
        """Return the value shared by all targets.

        This is the project value when set, otherwise the option default.
        """
        if self.project_value is not None:
            return self.project_value
        return self.definition.default

    @property
    def bool_value(self) -> bool:
        """Interpret the common value as a boolean."""
        return self.common_value == BOOL_TRUE

    def value_for_target(self, label: str) -> str | None:
        """Return the effective value for a target.

        Args:
            label: The target label string.

        Returns:
            The target override if present, otherwise the common value.
        """
        return self.target_values.get(label, self.common_value)

    def to_dict(self) -> dict[str, object]:
        """Serialize to the on-disk form."""
        result: dict[str, object] = {}
        if self.project_value is not None:
            result[_PROJECT_VALUE_KEY] = self.project_value
        if self.target_values:
            result[_TARGET_VALUES_KEY] = dict(self.target_values)
        return result

    @classmethod
    def from_dict(cls, key: OptionKey, data: object) -> Self:
        """Parse an option from its on-disk form.

        Args:
            key: The option key.
            data: The raw entry.

        Returns:
            The parsed option.

        Raises:
            ValueError: If the entry is malformed.
        """
        if not isinstance(data, Mapping):
            msg = f"Option entry must be an object, got {type(data).__name__}"
            raise ValueError(msg)  # noqa: TRY004

        value_type = OPTION_DEFINITIONS[key].value_type

        project_value: str | None = None
        raw_project = data.get(_PROJECT_VALUE_KEY)
        if raw_project is not None:
            project_value = _coerce_value(raw_project, value_type)

        target_values: dict[str, str] = {}
        raw_targets = data.get(_TARGET_VALUES_KEY)
        if raw_targets is not None:
            if not isinstance(raw_targets, Mapping):
                msg = "Target values must be an object"
                raise ValueError(msg)
            for label, value in raw_targets.items():
                target_values[str(label)] = _coerce_value(value, value_type)

        return cls(key=key, project_value=project_value, target_values=target_values)
