"""Slack connections of the Slack integration."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient, Response
from pdapi.model import Model, wire


@dataclass
class ConnectionConfig(Model):
    """Which notifications a Slack connection posts; priorities and urgency are always sent."""

    events: list[str] | None = None
    priorities: list[str] | None = wire(keep=True)
    urgency: str | None = wire(keep=True)


@dataclass
class SlackConnection(Model):
    """A connection between an object and a Slack channel; its config is always sent."""

    id: str = ""
    source_id: str = ""
    source_name: str = ""
    source_type: str = ""
    channel_id: str = ""
    channel_name: str = ""
    workspace_id: str = ""
    config: ConnectionConfig = wire(factory=ConnectionConfig)
    notification_type: str = ""


@dataclass
class ListSlackConnectionsResponse(Model):
    """A list of Slack connections."""

    total: int = 0
    slack_connections: list[SlackConnection] | None = None
    offset: int = 0
    more: bool = False
    limit: int = 0


def _connections_path(workspace_id: str) -> str:
    return f"/integration-slack/workspaces/{workspace_id}/connections"


class SlackConnectionService:
    """Slack connection endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self, workspace_id: str) -> ListSlackConnectionsResponse:
        """List every connection of a workspace, across all pages."""
        items = self._api.paged_get(
            _connections_path(workspace_id), "slack_connections", SlackConnection
        )
        return ListSlackConnectionsResponse(slack_connections=items)

    def create(
        self, workspace_id: str, connection: SlackConnection
    ) -> SlackConnection | None:
        """Create a connection; the result carries the workspace id."""
        response = self._api.request(
            "POST",
            _connections_path(workspace_id),
            body={"slack_connection": connection.to_dict()},
        )
        created = SlackConnection.from_dict(response.json().get("slack_connection"))
        if created is not None:
            created.workspace_id = workspace_id
        return created

    def get(self, workspace_id: str, connection_id: str) -> SlackConnection | None:
        """Fetch a connection."""
        response = self._api.request(
            "GET", f"{_connections_path(workspace_id)}/{connection_id}"
        )
        return SlackConnection.from_dict(response.json().get("slack_connection"))

    def delete(self, workspace_id: str, connection_id: str) -> Response:
        """Delete a connection."""
        return self._api.request(
            "DELETE", f"{_connections_path(workspace_id)}/{connection_id}"
        )

    def update(
        self, workspace_id: str, connection_id: str, connection: SlackConnection
    ) -> SlackConnection | None:
        """Update a connection."""
        response = self._api.request(
            "PUT",
            f"{_connections_path(workspace_id)}/{connection_id}",
            body={"slack_connection": connection.to_dict()},
        )
        return SlackConnection.from_dict(response.json().get("slack_connection"))