"""Unit tests for projgen exceptions.

These tests verify that exception constructors correctly store context
attributes. We don't test Python built-in behaviors (inheritance, str()).
"""

from pathlib import Path

from projgen.exceptions import (
    BadInputFilePath,
    FailedToReadAdditionalOptionsData,
    GeneratorConfigError,
    SerializationFailed,
)


class TestGeneratorConfigError:
    def test_stores_reason_and_path(self) -> None:
        error = FailedToReadAdditionalOptionsData(
            "Invalid per-user options file",
            path=Path("/work/alice.projgen-user"),
        )

        assert error.reason == "Invalid per-user options file"
        assert error.path == Path("/work/alice.projgen-user")

    def test_context_fields_default(self) -> None:
        error = SerializationFailed()

        assert error.reason == ""
        assert error.path is None

    def test_all_errors_share_base(self) -> None:
        assert isinstance(BadInputFilePath(), GeneratorConfigError)


class TestBadInputFilePath:
    def test_derives_reason_from_path(self) -> None:
        error = BadInputFilePath(path=Path("/work/App.projgen"))

        assert "/work/App.projgen" in error.reason

    def test_explicit_reason_wins(self) -> None:
        error = BadInputFilePath("gone", path=Path("/work/App.projgen"))

        assert error.reason == "gone"
