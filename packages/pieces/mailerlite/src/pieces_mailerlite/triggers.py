"""MailerLite webhook triggers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pieces_core.framework import (
    Property,
    Trigger,
    TriggerContext,
    TriggerStrategy,
    create_trigger,
)

from .auth import mailerlite_auth
from .client import MailerLiteClient
from .config import MailerLiteConfig

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], MailerLiteClient]

SUBSCRIBER_SAMPLE: dict[str, Any] = {
    "id": "112375610569918142",
    "email": "aa@gmail.com",
    "status": "active",
    "source": "manual",
    "sent": None,
    "opens_count": None,
    "clicks_count": None,
    "open_rate": 0,
    "click_rate": 0,
    "ip_address": None,
    "subscribed_at": "2024-02-05T21:48:53.000000Z",
    "unsubscribed_at": None,
    "created_at": "2024-02-05T21:48:53.000000Z",
    "updated_at": "2024-02-05T21:48:53.000000Z",
    "deleted_at": None,
    "forget_at": None,
    "fields": {
        "name": "ad",
        "last_name": None,
        "company": None,
        "country": None,
        "city": None,
        "phone": None,
        "state": None,
        "z_i_p": None,
    },
    "opted_in_at": None,
    "optin_ip": None,
}

UNSUBSCRIBED_SAMPLE: dict[str, Any] = {
    "id": "112374478518880188",
    "email": "example@gmail.com",
    "status": "unsubscribed",
    "source": "manual",
    "sent": 0,
    "opens_count": 0,
    "clicks_count": 0,
    "open_rate": 0,
    "click_rate": 0,
    "ip_address": None,
    "subscribed_at": "2024-02-05 21:30:54",
    "unsubscribed_at": "2024-02-05 21:54:58",
    "created_at": "2024-02-05 21:30:53",
    "updated_at": "2024-02-05 21:54:58",
    "opted_in_at": None,
    "optin_ip": None,
    "email_changed_at": None,
}

ADDED_TO_GROUP_SAMPLE: dict[str, Any] = {
    "type": "subscriber.added_to_group",
    "subscriber": SUBSCRIBER_SAMPLE,
    "group": {"id": "108162245463115431", "name": "[M]'s Network"},
}


def default_client_factory(api_key: str) -> MailerLiteClient:
    return MailerLiteClient(MailerLiteConfig(api_key=api_key))


def register_trigger(
    *,
    name: str,
    display_name: str,
    description: str,
    sample_data: Any = None,
    client_factory: ClientFactory | None = None,
) -> Trigger:
    """
    Build a webhook trigger for one MailerLite event.

    *name* is both the trigger name and the MailerLite event subscribed
    to; the created webhook is kept in the store under the same key.
    """
    make_client = client_factory or default_client_factory

    async def on_enable(context: TriggerContext) -> None:
        client = make_client(context.auth)
        try:
            webhook = await client.create_webhook(
                name=context.props_value["name"],
                events=[name],
                url=context.webhook_url,
            )
        except Exception:
            logger.exception("Could not create MailerLite webhook for %s", name)
            raise
        await context.store.put(name, webhook)

    async def on_disable(context: TriggerContext) -> None:
        webhook = await context.store.get(name)
        webhook_id = (webhook or {}).get("data", {}).get("id")
        if not webhook_id:
            logger.debug("No stored MailerLite webhook for %s", name)
            return
        await make_client(context.auth).delete_webhook(webhook_id)
        await context.store.delete(name)

    async def run(context: TriggerContext) -> list[Any]:
        return [context.payload.body]

    return create_trigger(
        name=name,
        display_name=display_name,
        description=description,
        type=TriggerStrategy.WEBHOOK,
        run=run,
        on_enable=on_enable,
        on_disable=on_disable,
        props={"name": Property.short_text("Webhook Name", required=True)},
        sample_data=sample_data,
        auth=mailerlite_auth,
    )


TRIGGER_DEFINITIONS: list[dict[str, Any]] = [
    {
        "name": "subscriber.created",
        "display_name": "New Subscription",
        "description": "Fires when a new subscriber is added to an account",
        "sample_data": SUBSCRIBER_SAMPLE,
    },
    {
        "name": "subscriber.unsubscribed",
        "display_name": "New Unsubscription",
        "description": "Fires when a subscriber becomes unsubscribed",
        "sample_data": UNSUBSCRIBED_SAMPLE,
    },
    {
        "name": "subscriber.added_to_group",
        "display_name": "Added to Group",
        "description": "Fires when a subscriber is added to a group",
        "sample_data": ADDED_TO_GROUP_SAMPLE,
    },
]


def build_triggers(client_factory: ClientFactory | None = None) -> list[Trigger]:
    return [
        register_trigger(**definition, client_factory=client_factory)
        for definition in TRIGGER_DEFINITIONS
    ]
