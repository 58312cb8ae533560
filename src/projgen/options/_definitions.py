"""Option schema.

This module defines the recognized generator options, the scope each option is
persisted in, and how its values are interpreted.
"""

from dataclasses import dataclass
from enum import StrEnum

# Container key under which option entries are stored in config files.
OPTION_SET_KEY = "optionSet"

BOOL_TRUE = "YES"
BOOL_FALSE = "NO"


class OptionScope(StrEnum):
    """Where an option value is persisted.

    Shared options are written to the version-controlled config file, per-user
    options to the sibling per-user settings file.
    """

    SHARED = "shared"
    PER_USER = "per_user"


class OptionValueType(StrEnum):
    """How an option's string value is interpreted."""

    STRING = "string"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"


class OptionKey(StrEnum):
    """Recognized option keys, valued by their on-disk names."""

    BAZEL_PATH = "BazelPath"
    WORKSPACE_ROOT_PATH = "WorkspaceRootPath"
    BAZEL_BUILD_OPTIONS_DEBUG = "BazelBuildOptionsDebug"
    BAZEL_BUILD_OPTIONS_RELEASE = "BazelBuildOptionsRelease"
    BAZEL_BUILD_STARTUP_OPTIONS_DEBUG = "BazelBuildStartupOptionsDebug"
    BAZEL_BUILD_STARTUP_OPTIONS_RELEASE = "BazelBuildStartupOptionsRelease"
    BUILD_ACTION_PRE_ACTION_SCRIPT = "BuildActionPreActionScript"
    INCLUDE_BUILD_SOURCES = "IncludeBuildSources"
    SUPPRESS_SWIFT_UPDATE_CHECK = "SuppressSwiftUpdateCheck"
    PROJECT_PRIORITIZES_SWIFT = "ProjectPrioritizesSwift"


@dataclass(frozen=True, slots=True)
class OptionDefinition:
    """Schema entry for a single option.

    Attributes:
        key: The option key.
        scope: Which file the option is persisted into.
        value_type: How the option's value is interpreted.
        default: Value used when neither the project nor a target sets one.
        description: Human-readable summary.
    """

    key: OptionKey
    scope: OptionScope
    value_type: OptionValueType
    default: str | None
    description: str


def _define(
    key: OptionKey,
    value_type: OptionValueType,
    description: str,
    *,
    default: str | None = None,
    scope: OptionScope = OptionScope.SHARED,
) -> tuple[OptionKey, OptionDefinition]:
    return key, OptionDefinition(
        key=key,
        scope=scope,
        value_type=value_type,
        default=default,
        description=description,
    )


OPTION_DEFINITIONS: dict[OptionKey, OptionDefinition] = dict(
    [
        _define(
            OptionKey.BAZEL_PATH,
            OptionValueType.STRING,
            "Path to the build tool binary.",
            scope=OptionScope.PER_USER,
        ),
        _define(
            OptionKey.WORKSPACE_ROOT_PATH,
            OptionValueType.STRING,
            "Path to the workspace root on this machine.",
            scope=OptionScope.PER_USER,
        ),
        _define(
            OptionKey.BAZEL_BUILD_OPTIONS_DEBUG,
            OptionValueType.STRING_LIST,
            "Build flags passed for Debug builds.",
        ),
        _define(
            OptionKey.BAZEL_BUILD_OPTIONS_RELEASE,
            OptionValueType.STRING_LIST,
            "Build flags passed for Release builds.",
        ),
        _define(
            OptionKey.BAZEL_BUILD_STARTUP_OPTIONS_DEBUG,
            OptionValueType.STRING_LIST,
            "Startup flags passed for Debug builds.",
        ),
        _define(
            OptionKey.BAZEL_BUILD_STARTUP_OPTIONS_RELEASE,
            OptionValueType.STRING_LIST,
            "Startup flags passed for Release builds.",
        ),
        _define(
            OptionKey.BUILD_ACTION_PRE_ACTION_SCRIPT,
            OptionValueType.STRING,
            "Script run before each build action.",
        ),
        _define(
            OptionKey.INCLUDE_BUILD_SOURCES,
            OptionValueType.BOOLEAN,
            "Add BUILD files to the generated project.",
            default=BOOL_FALSE,
        ),
        _define(
            OptionKey.SUPPRESS_SWIFT_UPDATE_CHECK,
            OptionValueType.BOOLEAN,
            "Suppress the IDE's Swift migration prompt.",
            default=BOOL_TRUE,
        ),
        _define(
            OptionKey.PROJECT_PRIORITIZES_SWIFT,
            OptionValueType.BOOLEAN,
            "Prefer Swift-specific defaults in the generated project.",
            default=BOOL_FALSE,
        ),
    ]
)
