"""
Runtime settings: upstream endpoints, fetch timeout and the URL templates
built from them.

The templates are part of the external contract. Cache keys and example
sources depend on them, so they are plain string formats rather than
anything discovered at runtime.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_DOCS_URL = "https://ui.shadcn.com"
DEFAULT_GITHUB_URL = "https://github.com/shadcn-ui/ui"
DEFAULT_RAW_GITHUB_URL = "https://raw.githubusercontent.com/shadcn-ui/ui/main"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ShadcnDocs/0.1.0)"

COMPONENTS_PATH = "/docs/components"


class Settings(BaseModel):
    """Endpoints and fetch limits shared by the fetcher and the service."""

    docs_url: str = DEFAULT_DOCS_URL
    github_url: str = DEFAULT_GITHUB_URL
    raw_github_url: str = DEFAULT_RAW_GITHUB_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    model_config = ConfigDict(frozen=True)

    @field_validator("docs_url", "github_url", "raw_github_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        # A fetch must never hang the process
        if value <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return value

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """
        Build settings from environment variables, keeping defaults for
        anything unset.

        Recognized: SHADCN_DOCS_URL, SHADCN_GITHUB_URL, SHADCN_RAW_GITHUB_URL,
        SHADCN_FETCH_TIMEOUT, SHADCN_USER_AGENT.
        """
        env = os.environ if environ is None else environ
        mapping = {
            "docs_url": "SHADCN_DOCS_URL",
            "github_url": "SHADCN_GITHUB_URL",
            "raw_github_url": "SHADCN_RAW_GITHUB_URL",
            "timeout": "SHADCN_FETCH_TIMEOUT",
            "user_agent": "SHADCN_USER_AGENT",
        }
        values = {field: env[var] for field, var in mapping.items() if env.get(var)}
        return cls(**values)

    # --- URL templates ---

    def index_url(self) -> str:
        return f"{self.docs_url}{COMPONENTS_PATH}"

    def component_url(self, name: str) -> str:
        return f"{self.docs_url}{COMPONENTS_PATH}/{name}"

    def source_url(self, name: str) -> str:
        return f"{self.github_url}/tree/main/apps/www/registry/default/ui/{name}"

    def demo_url(self, name: str) -> str:
        return f"{self.raw_github_url}/apps/www/registry/default/example/{name}-demo.tsx"
