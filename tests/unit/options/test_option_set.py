from unittest.mock import MagicMock

from projgen.options import OPTION_SET_KEY, OptionKey, OptionScope, OptionSet


class TestOptionsFromContainer:
    def test_returns_option_map(self) -> None:
        container = {OPTION_SET_KEY: {"BazelPath": {"p": "/opt/bazel"}}}

        assert OptionSet.options_from_container(container) == {
            "BazelPath": {"p": "/opt/bazel"}
        }

    def test_returns_none_when_missing(self) -> None:
        assert OptionSet.options_from_container({"projectName": "x"}) is None

    def test_returns_none_when_not_an_object(self) -> None:
        assert OptionSet.options_from_container({OPTION_SET_KEY: ["a"]}) is None

    def test_returns_copy(self) -> None:
        inner = {"BazelPath": {"p": "/opt/bazel"}}

        result = OptionSet.options_from_container({OPTION_SET_KEY: inner})
        assert result is not None
        result["WorkspaceRootPath"] = {"p": "/src"}

        assert "WorkspaceRootPath" not in inner


class TestOptionSetFromDict:
    def test_parses_known_options(self, mock_logger: MagicMock) -> None:
        options = OptionSet.from_dict(
            {
                "BazelPath": {"p": "/opt/bazel"},
                "BazelBuildOptionsDebug": {"p": "-c dbg"},
            },
            mock_logger,
        )

        assert options[OptionKey.BAZEL_PATH].project_value == "/opt/bazel"
        assert options[OptionKey.BAZEL_BUILD_OPTIONS_DEBUG].project_value == "-c dbg"
        mock_logger.warning.assert_not_called()

    def test_skips_unknown_keys_with_warning(self, mock_logger: MagicMock) -> None:
        options = OptionSet.from_dict({"NotAnOption": {"p": "x"}}, mock_logger)

        assert options.options == {}
        mock_logger.warning.assert_called_once_with(
            "unknown_option_key", key="NotAnOption"
        )

    def test_skips_malformed_entries_with_warning(
        self, mock_logger: MagicMock
    ) -> None:
        options = OptionSet.from_dict(
            {"BazelPath": "/opt/bazel", "WorkspaceRootPath": {"p": "/src"}},
            mock_logger,
        )

        assert OptionKey.BAZEL_PATH not in options
        assert OptionKey.WORKSPACE_ROOT_PATH in options
        assert mock_logger.warning.call_args.args[0] == "invalid_option_entry"

    def test_drops_empty_entries(self, mock_logger: MagicMock) -> None:
        options = OptionSet.from_dict({"BazelPath": {}}, mock_logger)

        assert OptionKey.BAZEL_PATH not in options


class TestOptionSetAccess:
    def test_missing_option_is_empty(self) -> None:
        option = OptionSet()[OptionKey.BAZEL_PATH]

        assert option.key == OptionKey.BAZEL_PATH
        assert not option.has_values

    def test_with_value_returns_new_set(self) -> None:
        original = OptionSet()

        updated = original.with_value(OptionKey.BAZEL_PATH, "/opt/bazel")

        assert updated[OptionKey.BAZEL_PATH].project_value == "/opt/bazel"
        assert OptionKey.BAZEL_PATH not in original

    def test_with_value_sets_target_value(self) -> None:
        options = OptionSet().with_value(
            OptionKey.BAZEL_BUILD_OPTIONS_DEBUG, "-c opt", target="//app:App"
        )

        option = options[OptionKey.BAZEL_BUILD_OPTIONS_DEBUG]
        assert option.project_value is None
        assert option.target_values == {"//app:App": "-c opt"}

    def test_with_none_clears_value(self) -> None:
        options = OptionSet().with_value(OptionKey.BAZEL_PATH, "/opt/bazel")

        cleared = options.with_value(OptionKey.BAZEL_PATH, None)

        assert OptionKey.BAZEL_PATH not in cleared

    def test_with_none_clears_target_value(self) -> None:
        options = OptionSet().with_value(
            OptionKey.BAZEL_BUILD_OPTIONS_DEBUG, "-c opt", target="//app:App"
        )

        cleared = options.with_value(
            OptionKey.BAZEL_BUILD_OPTIONS_DEBUG, None, target="//app:App"
        )

        assert OptionKey.BAZEL_BUILD_OPTIONS_DEBUG not in cleared


class TestOptionSetSave:
    def _options(self) -> OptionSet:
        return (
            OptionSet()
            .with_value(OptionKey.BAZEL_PATH, "/opt/bazel")
            .with_value(OptionKey.BAZEL_BUILD_OPTIONS_DEBUG, "-c dbg")
        )

    def test_to_dict_filters_by_scope(self) -> None:
        options = self._options()

        assert options.to_dict(OptionScope.SHARED) == {
            "BazelBuildOptionsDebug": {"p": "-c dbg"}
        }
        assert options.to_dict(OptionScope.PER_USER) == {
            "BazelPath": {"p": "/opt/bazel"}
        }
        assert len(options.to_dict()) == 2

    def test_save_shared_into_writes_option_map(self) -> None:
        container: dict[str, object] = {"projectName": "App"}

        self._options().save_shared_into(container)

        assert container == {
            "projectName": "App",
            OPTION_SET_KEY: {"BazelBuildOptionsDebug": {"p": "-c dbg"}},
        }

    def test_save_per_user_into_writes_option_map(self) -> None:
        container: dict[str, object] = {}

        self._options().save_per_user_into(container)

        assert container == {OPTION_SET_KEY: {"BazelPath": {"p": "/opt/bazel"}}}

    def test_save_leaves_container_untouched_when_empty(self) -> None:
        container: dict[str, object] = {}

        OptionSet().save_shared_into(container)
        OptionSet().save_per_user_into(container)

        assert container == {}
