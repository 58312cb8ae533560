import getpass

import pytest

from projgen.utils import get_user_name


class TestGetUserName:
    def test_prefers_environment_override(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PROJGEN_USER", "ci-bot")

        assert get_user_name() == "ci-bot"

    def test_falls_back_to_login_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROJGEN_USER", raising=False)
        monkeypatch.setattr(getpass, "getuser", lambda: "alice")

        assert get_user_name() == "alice"
