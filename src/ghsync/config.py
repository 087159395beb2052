"""
Transport configuration for the GitHub client.
"""

import os
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub API configuration (no credentials: tokens are passed per call)"""
    api_url: str = "https://api.github.com"
    api_version: str = "2022-11-28"
    timeout: float = 30.0
    user_agent: str = "ghsync"

    @classmethod
    def from_env(cls) -> "GitHubConfig":
        """
        Build configuration from environment variables.

        Reads GITHUB_API_URL, GITHUB_API_VERSION, GITHUB_TIMEOUT and
        GITHUB_USER_AGENT; unset variables keep their defaults.

        Raises:
            ValueError: GITHUB_TIMEOUT is not a positive number
        """
        defaults = cls()
        raw_timeout = os.getenv("GITHUB_TIMEOUT")
        timeout = defaults.timeout
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"GITHUB_TIMEOUT must be a number, got '{raw_timeout}'") from None
            if timeout <= 0:
                raise ValueError(f"GITHUB_TIMEOUT must be positive, got {timeout}")

        return cls(
            api_url=os.getenv("GITHUB_API_URL", defaults.api_url).rstrip("/"),
            api_version=os.getenv("GITHUB_API_VERSION", defaults.api_version),
            timeout=timeout,
            user_agent=os.getenv("GITHUB_USER_AGENT", defaults.user_agent),
        )

    @property
    def base_headers(self) -> Dict[str, str]:
        """Headers sent with every request"""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.api_version,
            "User-Agent": self.user_agent,
        }
