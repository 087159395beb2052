"""Unit tests for GitHubConfig."""

import pytest

from ghsync.config import GitHubConfig

ENV_VARS = ("GITHUB_API_URL", "GITHUB_API_VERSION", "GITHUB_TIMEOUT", "GITHUB_USER_AGENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestFromEnv:
    """Tests for GitHubConfig.from_env."""

    def test_defaults(self) -> None:
        assert GitHubConfig.from_env() == GitHubConfig()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")
        monkeypatch.setenv("GITHUB_TIMEOUT", "12.5")
        monkeypatch.setenv("GITHUB_USER_AGENT", "bench-bot")

        config = GitHubConfig.from_env()

        assert config.api_url == "https://ghe.example.com/api/v3"
        assert config.timeout == 12.5
        assert config.base_headers["User-Agent"] == "bench-bot"

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("GITHUB_TIMEOUT", value)

        with pytest.raises(ValueError):
            GitHubConfig.from_env()
