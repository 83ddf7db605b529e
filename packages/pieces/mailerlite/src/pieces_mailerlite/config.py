from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://connect.mailerlite.com/api"


@dataclass(frozen=True)
class MailerLiteConfig:
    """Connection settings for the MailerLite API.

    Attributes:
        api_key: Bearer token from the MailerLite integrations page.
        base_url: API root.
        timeout: Request timeout in seconds.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
