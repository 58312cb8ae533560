"""Default values and file naming for generator configs."""

CONFIG_FILE_EXTENSION = "projgen"
PER_USER_FILE_EXTENSION = "projgen-user"
PROJECT_FILE_EXTENSION = "xcodeproj"

DEFAULT_PROJECT_NAME = "Unnamed Project"

# Config file keys
PROJECT_NAME_KEY = "projectName"
BUILD_TARGETS_KEY = "buildTargets"
PATH_FILTERS_KEY = "sourceFilters"
# Deprecated: superseded by PATH_FILTERS_KEY. Read on load, never written.
LEGACY_SOURCE_TARGETS_KEY = "sourceTargets"
ADDITIONAL_FILE_PATHS_KEY = "additionalFilePaths"


def sanitize_filename(filename: str) -> str:
    """Return a copy of the filename with path separators replaced."""
    return filename.replace("/", "_")
