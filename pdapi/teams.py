"""Teams, their members and escalation policies."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient, Response
from pdapi.model import Model, TeamReference, UserReference, wire


@dataclass
class Team(Model):
    """A team."""

    description: str = ""
    html_url: str = ""
    id: str = ""
    name: str = ""
    self_url: str = wire("self", default="")
    summary: str = ""
    type: str = ""
    parent: TeamReference | None = None


@dataclass
class Member(Model):
    """A member of a team."""

    user: UserReference | None = None
    role: str = ""


@dataclass
class ListTeamsOptions(Model):
    """Query options for listing teams."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    query: str = ""


@dataclass
class ListTeamsResponse(Model):
    """A list of teams."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    teams: list[Team] | None = None


@dataclass
class GetMembersOptions(Model):
    """Query options for listing team members."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    includes: list[str] | None = wire("include")


@dataclass
class GetMembersResponse(Model):
    """A list of team members."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    members: list[Member] | None = None


class TeamService:
    """Team endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self, options: ListTeamsOptions | None = None) -> ListTeamsResponse | None:
        """List teams."""
        response = self._api.request("GET", "/teams", params=options)
        return ListTeamsResponse.from_dict(response.json())

    def create(self, team: Team) -> Team | None:
        """Create a team."""
        response = self._api.request("POST", "/teams", body={"team": team.to_dict()})
        return Team.from_dict(response.json().get("team"))

    def delete(self, team_id: str) -> Response:
        """Delete a team."""
        return self._api.request("DELETE", f"/teams/{team_id}")

    def get(self, team_id: str) -> Team | None:
        """Fetch a team."""
        response = self._api.request("GET", f"/teams/{team_id}")
        return Team.from_dict(response.json().get("team"))

    def update(self, team_id: str, team: Team) -> Team | None:
        """Update a team."""
        response = self._api.request(
            "PUT", f"/teams/{team_id}", body={"team": team.to_dict()}
        )
        return Team.from_dict(response.json().get("team"))

    def remove_user(self, team_id: str, user_id: str) -> Response:
        """Remove a user from a team."""
        return self._api.request("DELETE", f"/teams/{team_id}/users/{user_id}")

    def add_user(self, team_id: str, user_id: str) -> Response:
        """Add a user to a team."""
        return self._api.request("PUT", f"/teams/{team_id}/users/{user_id}")

    def add_user_with_role(self, team_id: str, user_id: str, role: str) -> Response:
        """Add a user with a role: observer, manager or responder (the default)."""
        body = {"role": role} if role else {}
        return self._api.request("PUT", f"/teams/{team_id}/users/{user_id}", body=body)

    def get_members(
        self, team_id: str, options: GetMembersOptions | None = None
    ) -> GetMembersResponse:
        """List every member of a team, across all pages.

        The listing always walks every page, so ``options`` do not narrow it.
        """
        members = self._api.paged_get(f"/teams/{team_id}/members", "members", Member)
        return GetMembersResponse(members=members)

    def remove_escalation_policy(self, team_id: str, policy_id: str) -> Response:
        """Remove an escalation policy from a team."""
        return self._api.request(
            "DELETE", f"/teams/{team_id}/escalation_policies/{policy_id}"
        )

    def add_escalation_policy(self, team_id: str, policy_id: str) -> Response:
        """Add an escalation policy to a team."""
        return self._api.request(
            "PUT", f"/teams/{team_id}/escalation_policies/{policy_id}"
        )