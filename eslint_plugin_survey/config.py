"""Configuration loaded from environment variables."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


TOKEN_VARIABLE = "GITHUB_AUTH"


class MissingCredentialError(Exception):
    """Exception raised when the GitHub access token is not configured."""

    def __init__(self):
        super().__init__(
            f"Missing `{TOKEN_VARIABLE}` environment variable containing GitHub "
            f"access token with `public_repo` scope."
        )


@dataclass(frozen=True)
class Settings:
    """Runtime settings shared by the crawl and analysis entry points."""
    github_token: Optional[str]
    output_root: Path
    page_count: int = 10  # GitHub only serves the first 1000 search results
    page_size: int = 100
    clone_delay_seconds: float = 1.0
    github_api_url: str = "https://api.github.com"
    log_level: str = "INFO"


def load_environment() -> None:
    """Load environment variables from .env or env file."""
    load_dotenv('.env') or load_dotenv('env')


def load_settings(require_token: bool = True) -> Settings:
    """Build Settings from environment variables.

    Args:
        require_token: Fail when no GitHub access token is configured

    Raises:
        MissingCredentialError: If the token is required but missing
    """
    github_token = os.getenv(TOKEN_VARIABLE)
    if require_token and not github_token:
        raise MissingCredentialError()

    return Settings(
        github_token=github_token,
        output_root=Path(os.getenv("OUTPUT_ROOT", "output")),
        page_count=int(os.getenv("PAGE_COUNT", "10")),
        page_size=min(int(os.getenv("PAGE_SIZE", "100")), 100),
        clone_delay_seconds=float(os.getenv("CLONE_DELAY_SECONDS", "1")),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper()
    )
