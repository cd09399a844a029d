import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from jira_simple.utils.errors import ConfigurationError

# JIRA_BASE_URL is accepted as an alias for JIRA_URL
URL_VARS = ("JIRA_URL", "JIRA_BASE_URL")


@dataclass(frozen=True)
class Config:
    """Settings for one server process, read once at startup.

    Attributes:
        base_url: Jira site root, e.g. https://example.atlassian.net
        email: Account email used for basic auth
        api_token: Atlassian API token paired with the email
        log_level: Name of the logging level for the jira_simple loggers
        log_dir: Directory for log files; stderr only when unset
    """

    base_url: str
    email: str
    api_token: str
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from environment variables.

        Raises:
            ConfigurationError: if the URL, email or token is missing
        """
        env = os.environ if environ is None else environ

        base_url = next((env[name] for name in URL_VARS if env.get(name, "").strip()), "")
        email = env.get("JIRA_EMAIL", "")
        api_token = env.get("JIRA_API_TOKEN", "")

        missing = [
            name
            for name, value in (
                ("JIRA_URL", base_url),
                ("JIRA_EMAIL", email),
                ("JIRA_API_TOKEN", api_token),
            )
            if not value.strip()
        ]
        if missing:
            raise ConfigurationError(missing)

        return cls(
            base_url=base_url.strip().rstrip("/"),
            email=email.strip(),
            api_token=api_token.strip(),
            log_level=env.get("JIRA_MCP_LOG_LEVEL", "INFO").upper(),
            log_dir=env.get("JIRA_MCP_LOG_DIR") or None,
        )


def load_environment() -> None:
    """Load a .env file from the working directory, keeping real env values."""
    load_dotenv(override=False)
