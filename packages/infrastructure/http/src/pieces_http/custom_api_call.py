"""
Builder for the generic "Custom API Call" action most pieces expose.

The action lets a flow call any endpoint of the piece's API with the
connection's credentials injected::

    custom_call = create_custom_api_call_action(
        base_url=lambda auth: "https://connect.mailerlite.com/api",
        auth=mailerlite_auth,
        auth_mapping=bearer_headers,
    )
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pieces_core.framework import (
    Action,
    ActionContext,
    DropdownOption,
    PieceAuth,
    Property,
    PropertyDefinition,
    create_action,
)

from .client import HttpClient, http_client
from .exceptions import HttpError
from .helpers import is_absolute_url, join_base_url
from .models import HttpMethod, HttpRequest

logger = logging.getLogger(__name__)

BaseUrlResolver = Callable[[Any], str]
AuthMapping = Callable[[Any, Mapping[str, Any]], Awaitable[Mapping[str, str] | None]]

URL_DESCRIPTION = (
    "You can either use the full URL or the relative path to the base URL "
    "i.e https://api.example.com/api/v1/users or /api/v1/users"
)


def _declare_props(
    base_url: BaseUrlResolver,
    overrides: Mapping[str, Mapping[str, Any]],
) -> dict[str, PropertyDefinition]:
    def override(name: str, prop: PropertyDefinition) -> PropertyDefinition:
        return prop.override(**overrides.get(name, {}))

    async def load_url(inputs: Mapping[str, Any]) -> dict[str, PropertyDefinition]:
        url = Property.short_text(
            "URL",
            description=URL_DESCRIPTION,
            required=True,
            default_value=base_url(inputs.get("auth")),
        )
        return {"url": override("url", url)}

    return {
        "url": Property.dynamic_properties("", props_loader=load_url, required=True),
        "method": override(
            "method",
            Property.static_dropdown(
                "Method",
                options=[DropdownOption(label=m.value, value=m.value) for m in HttpMethod],
                required=True,
            ),
        ),
        "headers": override(
            "headers",
            Property.object(
                "Headers",
                description="Authorization headers are injected automatically from your connection.",
                required=True,
            ),
        ),
        "query_params": override(
            "query_params", Property.object("Query Parameters", required=True)
        ),
        "body": override("body", Property.json("Body")),
        "failsafe": override("failsafe", Property.checkbox("No Error on Failure")),
        "timeout": override("timeout", Property.number("Timeout (in seconds)")),
    }


def create_custom_api_call_action(
    *,
    base_url: BaseUrlResolver,
    auth: PieceAuth | None = None,
    auth_mapping: AuthMapping | None = None,
    name: str | None = None,
    display_name: str | None = None,
    description: str | None = None,
    props: Mapping[str, Mapping[str, Any]] | None = None,
    extra_props: Mapping[str, PropertyDefinition] | None = None,
    client: HttpClient | None = None,
) -> Action:
    """
    Build the action.

    Args:
        base_url: Resolves the API root from the connection value.
        auth_mapping: Produces headers (e.g. ``Authorization``) from the
            connection; they win over user-supplied headers.
        props: Per-property overrides keyed by property name, e.g.
            ``{"failsafe": {"default_value": True}}``.
        extra_props: Additional properties appended after the built-ins.
        client: Client to send with; defaults to the shared ``http_client``.
    """
    sender = client or http_client

    async def run(context: ActionContext) -> Any:
        values = context.props_value
        url_value = values["url"]
        if isinstance(url_value, Mapping):
            url_value = url_value["url"]
        url = str(url_value)
        if not is_absolute_url(url):
            url = join_base_url(base_url(context.auth), url)

        headers = {k: str(v) for k, v in (values.get("headers") or {}).items()}
        if auth_mapping is not None:
            mapped = await auth_mapping(context.auth, values)
            if mapped:
                headers.update(mapped)

        timeout = values.get("timeout")
        request = HttpRequest(
            method=HttpMethod(values["method"]),
            url=url,
            headers=headers,
            query_params={k: str(v) for k, v in (values.get("query_params") or {}).items()},
            body=values.get("body"),
            timeout=int(timeout * 1000) if timeout else 0,
        )
        try:
            response = await sender.send_request(request)
        except HttpError as exc:
            if values.get("failsafe"):
                logger.warning("Custom API call failed, returning error: %s", exc)
                return exc.error_message()
            raise
        return response.to_dict()

    return create_action(
        name=name or "custom_api_call",
        display_name=display_name or "Custom API Call",
        description=description or "Make a custom API call to a specific endpoint",
        run=run,
        props={**_declare_props(base_url, props or {}), **(extra_props or {})},
        auth=auth,
        require_auth=auth is not None,
    )
