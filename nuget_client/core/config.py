"""Configuration from environment variables (.env)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_INDEX_URL_V3 = "https://api.nuget.org/v3/index.json"
DEFAULT_PAGE_SIZE = 10
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
USER_AGENT = "nuget-client/0.1.0"


def _optional_path(value: str | None) -> Path | None:
    if not value or not value.strip():
        return None
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class Config:
    default_index_url: str = DEFAULT_INDEX_URL_V3
    default_page_size: int = DEFAULT_PAGE_SIZE
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS  # 0 disables the timeout
    user_agent: str = USER_AGENT
    nuget_config_path: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Config":
        return cls(
            default_index_url=os.getenv("NUGET_DEFAULT_INDEX_URL", DEFAULT_INDEX_URL_V3).strip(),
            default_page_size=int(os.getenv("NUGET_DEFAULT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))),
            request_timeout_seconds=float(
                os.getenv("NUGET_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
            ),
            user_agent=os.getenv("NUGET_USER_AGENT", USER_AGENT),
            nuget_config_path=_optional_path(os.getenv("NUGET_CONFIG_PATH")),
            log_level=os.getenv("NUGET_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def request_timeout(self) -> float | None:
        """Per-request timeout in seconds, or None when disabled."""
        if self.request_timeout_seconds <= 0:
            return None
        return self.request_timeout_seconds

    def validate(self) -> list[str]:
        errors = []
        if self.default_page_size < 1:
            errors.append(f"Default page size must be positive: {self.default_page_size}")
        if self.request_timeout_seconds < 0:
            errors.append(f"Request timeout must not be negative: {self.request_timeout_seconds}")
        if not self.default_index_url.startswith(("http://", "https://")):
            errors.append(f"Default index URL is not an http(s) URL: {self.default_index_url}")
        return errors


config = Config.load()
