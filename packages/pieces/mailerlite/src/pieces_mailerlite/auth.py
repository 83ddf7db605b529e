from __future__ import annotations

from pieces_core.framework import SecretTextAuth

mailerlite_auth = SecretTextAuth(
    display_name="API Key",
    description="Create an API token under Integrations > MailerLite API.",
    required=True,
)
