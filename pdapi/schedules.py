"""Schedules, their layers and overrides."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient, Response
from pdapi.model import (
    EscalationPolicyReference,
    Model,
    TeamReference,
    UserReference,
    UserReferenceWrapper,
    wire,
)
from pdapi.user_models import User


@dataclass
class Override(Model):
    """A schedule override."""

    id: str = ""
    start: str = ""
    end: str = ""
    user: UserReference | None = None


@dataclass
class ScheduleLayerEntry(Model):
    """A rendered entry of a schedule layer."""

    end: str = ""
    start: str = ""
    user: UserReference | None = None


@dataclass
class SubSchedule(Model):
    """A sub-schedule of a schedule."""

    name: str = ""
    rendered_coverage_percentage: float = 0.0
    rendered_schedule_entries: list[ScheduleLayerEntry] | None = None


@dataclass
class Restriction(Model):
    """A restriction on a schedule layer."""

    duration_seconds: int = 0
    start_day_of_week: int = 0
    start_time_of_day: str = ""
    type: str = ""


@dataclass
class ScheduleLayer(Model):
    """A layer of a schedule; an end of None means the layer does not end."""

    end: str | None = wire(keep=True)
    id: str = ""
    name: str = ""
    rendered_coverage_percentage: float = 0.0
    rendered_schedule_entries: list[ScheduleLayerEntry] | None = None
    restrictions: list[Restriction] | None = None
    rotation_turn_length_seconds: int = 0
    rotation_virtual_start: str = ""
    start: str = ""
    users: list[UserReferenceWrapper] | None = None


@dataclass
class Schedule(Model):
    """A schedule."""

    description: str = ""
    escalation_policies: list[EscalationPolicyReference] | None = None
    final_schedule: SubSchedule | None = None
    html_url: str = ""
    id: str = ""
    name: str = ""
    overrides_subschedule: SubSchedule | None = None
    schedule_layers: list[ScheduleLayer] | None = None
    self_url: str = wire("self", default="")
    summary: str = ""
    time_zone: str = ""
    type: str = ""
    users: list[UserReference] | None = None
    teams: list[TeamReference] | None = None


@dataclass
class ListSchedulesOptions(Model):
    """Query options for listing schedules."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    query: str = ""
    total: int = 0


@dataclass
class ListSchedulesResponse(Model):
    """A list of schedules."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    schedules: list[Schedule] | None = None
    total: int = 0


@dataclass
class ListOnCallsOptions(Model):
    """Query options for listing on-call users."""

    id: str = ""
    since: str = ""
    until: str = ""


@dataclass
class ListOnCallsResponse(Model):
    """The users on call in a schedule."""

    users: list[User] | None = None


@dataclass
class ListOverridesOptions(Model):
    """Query options for listing overrides."""

    editable: bool = False
    id: str = ""
    overflow: bool = False
    since: str = ""
    until: str = ""


@dataclass
class ListOverridesResponse(Model):
    """A list of overrides."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    overrides: list[Override] | None = None
    total: int = 0


@dataclass
class GetScheduleOptions(Model):
    """Query options for fetching a schedule."""

    since: str = ""
    time_zone: str = ""
    until: str = ""


@dataclass
class CreateScheduleOptions(Model):
    """Query options for creating a schedule."""

    overflow: bool = False


@dataclass
class UpdateScheduleOptions(Model):
    """Query options for updating a schedule."""

    overflow: bool = False


class ScheduleService:
    """Schedule endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self, options: ListSchedulesOptions | None = None) -> ListSchedulesResponse | None:
        """List schedules."""
        response = self._api.request("GET", "/schedules", params=options)
        return ListSchedulesResponse.from_dict(response.json())

    def create(
        self, schedule: Schedule, options: CreateScheduleOptions | None = None
    ) -> Schedule | None:
        """Create a schedule."""
        response = self._api.request(
            "POST", "/schedules", params=options, body={"schedule": schedule.to_dict()}
        )
        return Schedule.from_dict(response.json().get("schedule"))

    def delete(self, schedule_id: str) -> Response:
        """Delete a schedule."""
        return self._api.request("DELETE", f"/schedules/{schedule_id}")

    def get(
        self, schedule_id: str, options: GetScheduleOptions | None = None
    ) -> Schedule | None:
        """Fetch a schedule."""
        response = self._api.request("GET", f"/schedules/{schedule_id}", params=options)
        return Schedule.from_dict(response.json().get("schedule"))

    def update(
        self,
        schedule_id: str,
        schedule: Schedule,
        options: UpdateScheduleOptions | None = None,
    ) -> Schedule | None:
        """Update a schedule."""
        response = self._api.request(
            "PUT",
            f"/schedules/{schedule_id}",
            params=options,
            body={"schedule": schedule.to_dict()},
        )
        return Schedule.from_dict(response.json().get("schedule"))

    def list_on_calls(
        self, schedule_id: str, options: ListOnCallsOptions | None = None
    ) -> ListOnCallsResponse | None:
        """List the users on call in a schedule for a time range."""
        response = self._api.request(
            "GET", f"/schedules/{schedule_id}/users", params=options
        )
        return ListOnCallsResponse.from_dict(response.json())

    def list_overrides(
        self, schedule_id: str, options: ListOverridesOptions | None = None
    ) -> ListOverridesResponse | None:
        """List the overrides of a schedule."""
        response = self._api.request(
            "GET", f"/schedules/{schedule_id}/overrides", params=options
        )
        return ListOverridesResponse.from_dict(response.json())

    def create_override(self, schedule_id: str, override: Override) -> Override | None:
        """Create an override on a schedule."""
        response = self._api.request(
            "POST",
            f"/schedules/{schedule_id}/overrides",
            body={"override": override.to_dict()},
        )
        return Override.from_dict(response.json().get("override"))

    def delete_override(self, schedule_id: str, override_id: str) -> Response:
        """Delete an override from a schedule."""
        return self._api.request(
            "DELETE", f"/schedules/{schedule_id}/overrides/{override_id}"
        )