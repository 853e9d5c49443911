"""Webhook subscriptions."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient, Response
from pdapi.model import Model, wire


@dataclass
class CustomHeader(Model):
    """A custom header sent with each webhook delivery."""

    name: str = ""
    value: str = ""


@dataclass
class DeliveryMethod(Model):
    """How webhook events are delivered; custom headers are sent as null when unset."""

    temporarily_disabled: bool = False
    type: str = ""
    url: str = ""
    custom_headers: list[CustomHeader] | None = wire(keep=True)
    secret: str = ""


@dataclass
class Filter(Model):
    """The object whose events a subscription receives."""

    id: str = ""
    type: str = ""


@dataclass
class WebhookSubscription(Model):
    """A webhook subscription; its delivery method and filter are always sent."""

    id: str = ""
    type: str = ""
    active: bool = False
    description: str = ""
    delivery_method: DeliveryMethod = wire(factory=DeliveryMethod)
    events: list[str] | None = None
    filter: Filter = wire(factory=Filter)


@dataclass
class ListWebhookSubscriptionsResponse(Model):
    """A list of webhook subscriptions."""

    total: int = 0
    webhook_subscriptions: list[WebhookSubscription] | None = None
    offset: int = 0
    more: bool = False
    limit: int = 0


class WebhookSubscriptionService:
    """Webhook subscription endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self) -> ListWebhookSubscriptionsResponse:
        """List every webhook subscription, across all pages."""
        items = self._api.paged_get(
            "/webhook_subscriptions", "webhook_subscriptions", WebhookSubscription
        )
        return ListWebhookSubscriptionsResponse(webhook_subscriptions=items)

    def create(self, subscription: WebhookSubscription) -> WebhookSubscription | None:
        """Create a webhook subscription."""
        response = self._api.request(
            "POST",
            "/webhook_subscriptions",
            body={"webhook_subscription": subscription.to_dict()},
        )
        return WebhookSubscription.from_dict(response.json().get("webhook_subscription"))

    def get(self, subscription_id: str) -> WebhookSubscription | None:
        """Fetch a webhook subscription."""
        response = self._api.request("GET", f"/webhook_subscriptions/{subscription_id}")
        return WebhookSubscription.from_dict(response.json().get("webhook_subscription"))

    def delete(self, subscription_id: str) -> Response:
        """Delete a webhook subscription."""
        return self._api.request("DELETE", f"/webhook_subscriptions/{subscription_id}")

    def update(
        self, subscription_id: str, subscription: WebhookSubscription
    ) -> WebhookSubscription | None:
        """Update a webhook subscription."""
        response = self._api.request(
            "PUT",
            f"/webhook_subscriptions/{subscription_id}",
            body={"webhook_subscription": subscription.to_dict()},
        )
        return WebhookSubscription.from_dict(response.json().get("webhook_subscription"))