"""projgen exceptions."""

from pathlib import Path  # noqa: TC003 - Used at runtime in __init__ signatures


class ProjgenError(Exception):
    """Base exception for projgen errors."""


# =============================================================================
# Generator Config Exceptions
# =============================================================================


class GeneratorConfigError(ProjgenError):
    """Base exception for generator configuration load and save failures.

    Attributes:
        reason: Human-readable debug information about the failure.
        path: Path of the file involved, when the failure is tied to one.
    """

    def __init__(self, reason: str = "", *, path: Path | None = None) -> None:
        """Initialize with a reason and optional file path context.

        Args:
            reason: Human-readable debug information about the failure.
            path: Path of the file involved, if any.
        """
        super().__init__(reason)
        self.reason: str = reason
        self.path: Path | None = path


class BadInputFilePath(GeneratorConfigError):  # noqa: N818
    """The given config file does not exist or cannot be read."""

    def __init__(self, reason: str = "", *, path: Path | None = None) -> None:
        """Initialize, deriving a reason from the path when none is given."""
        if not reason and path is not None:
            reason = f"Config file does not exist or cannot be read: {path}"
        super().__init__(reason, path=path)


class FailedToReadAdditionalOptionsData(GeneratorConfigError):  # noqa: N818
    """A per-user overlay file was found but could not be read or parsed."""


class DeserializationFailed(GeneratorConfigError):  # noqa: N818
    """The primary config contents are malformed or not a JSON object."""


class SerializationFailed(GeneratorConfigError):  # noqa: N818
    """The config could not be encoded or written."""
