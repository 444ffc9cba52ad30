from __future__ import annotations

import base64
import os
from typing import Dict, List, Literal, Mapping, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from .errors import ConfigurationError

DEFAULT_API_VERSION = 3
DEFAULT_TIMEOUT_MS = 30000


class BearerAuth(BaseModel):
    """Bearer token authentication (personal access token / OAuth access token)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bearer"] = "bearer"
    token: SecretStr = Field(..., description="Bearer token")

    def header_value(self) -> str:
        return f"Bearer {self.token.get_secret_value()}"


class BasicAuth(BaseModel):
    """Basic authentication with an account email and API token (Jira Cloud)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["basic"] = "basic"
    email: str = Field(..., min_length=1, description="Account email")
    api_token: SecretStr = Field(..., description="API token")

    def header_value(self) -> str:
        raw = f"{self.email}:{self.api_token.get_secret_value()}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


Auth = Union[BearerAuth, BasicAuth]


# PUBLIC_INTERFACE
class JiraClientConfig(BaseModel):
    """Immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., min_length=1, description="Jira site URL (e.g., https://your-domain.atlassian.net)")
    auth: Auth = Field(..., discriminator="kind", description="Authentication mode")
    api_version: int = Field(default=DEFAULT_API_VERSION, ge=1, description="REST API version")
    timeout: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout in milliseconds")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url}/rest/api/{self.api_version}"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.auth.header_value(),
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    # PUBLIC_INTERFACE
    @classmethod
    def from_credentials(
        cls,
        base_url: str,
        api_token: str,
        email: Optional[str] = None,
        api_version: int = DEFAULT_API_VERSION,
        timeout: int = DEFAULT_TIMEOUT_MS,
    ) -> "JiraClientConfig":
        """Build a config, selecting Basic auth when an email is given and Bearer otherwise."""
        auth: Auth = BasicAuth(email=email, api_token=api_token) if email else BearerAuth(token=api_token)
        return cls(base_url=base_url, auth=auth, api_version=api_version, timeout=timeout)

    # PUBLIC_INTERFACE
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, load_env_file: bool = True) -> "JiraClientConfig":
        """Create a config from environment variables.

        Required: JIRA_BASE_URL, JIRA_API_TOKEN.
        Optional: JIRA_EMAIL (selects Basic auth), JIRA_API_VERSION, JIRA_REQUEST_TIMEOUT (ms).
        A .env file is loaded first unless load_env_file is False or environ is given.
        """
        if environ is None:
            if load_env_file:
                load_dotenv()
            environ = os.environ

        problems: List[str] = []
        base_url = environ.get("JIRA_BASE_URL")
        api_token = environ.get("JIRA_API_TOKEN")
        email = environ.get("JIRA_EMAIL") or None
        if not base_url:
            problems.append("JIRA_BASE_URL environment variable is required")
        if not api_token:
            problems.append("JIRA_API_TOKEN environment variable is required")
        api_version = _int_env(environ, "JIRA_API_VERSION", DEFAULT_API_VERSION, problems)
        timeout = _int_env(environ, "JIRA_REQUEST_TIMEOUT", DEFAULT_TIMEOUT_MS, problems)

        if problems:
            raise ConfigurationError("; ".join(problems))
        try:
            return cls.from_credentials(base_url, api_token, email=email, api_version=api_version, timeout=timeout)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid Jira configuration: {exc}") from exc


def _int_env(environ: Mapping[str, str], name: str, default: int, problems: List[str]) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        problems.append(f"{name} must be an integer, got {raw!r}")
        return default
