"""Users, their contact methods and notification rules."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.model import (
    ContactMethodReference,
    LicenseReference,
    Model,
    TeamReference,
    wire,
)


@dataclass
class NotificationRule(Model):
    """A user notification rule; the start delay is always sent."""

    contact_method: ContactMethodReference | None = None
    html_url: str = ""
    id: str = ""
    self_url: str = wire("self", default="")
    start_delay_in_minutes: int = wire(keep=True, default=0)
    summary: str = ""
    type: str = ""
    urgency: str = ""


@dataclass
class User(Model):
    """A user."""

    avatar_url: str = ""
    color: str = ""
    description: str = ""
    email: str = ""
    html_url: str = ""
    id: str = ""
    invitation_sent: bool = False
    job_title: str = ""
    name: str = ""
    role: str = ""
    self_url: str = wire("self", default="")
    summary: str = ""
    time_zone: str = ""
    type: str = ""
    notification_rules: list[NotificationRule] | None = None
    teams: list[TeamReference] | None = None
    contact_methods: list[ContactMethodReference] | None = None
    license: LicenseReference | None = None


@dataclass
class License(Model):
    """A license that can be assigned to a user."""

    id: str = ""
    type: str = ""
    summary: str = ""
    self_url: str = wire("self", default="")
    html_url: str = ""


@dataclass
class PushContactMethodSound(Model):
    """A sound used by a push contact method."""

    type: str = ""
    file: str = ""


@dataclass
class ContactMethod(Model):
    """A contact method of a user."""

    id: str = ""
    summary: str = ""
    type: str = ""
    self_url: str = wire("self", default="")
    html_url: str = ""
    label: str = ""
    address: str = ""
    blacklisted: bool = False
    send_short_email: bool = False
    country_code: int = 0
    enabled: bool = False
    device_type: str = ""
    sounds: list[PushContactMethodSound] | None = None
    created_at: str = ""


@dataclass
class FullUser(Model):
    """A user fetched together with contact methods and notification rules."""

    avatar_url: str = ""
    color: str = ""
    description: str = ""
    email: str = ""
    html_url: str = ""
    id: str = ""
    invitation_sent: bool = False
    job_title: str = ""
    name: str = ""
    role: str = ""
    self_url: str = wire("self", default="")
    summary: str = ""
    time_zone: str = ""
    type: str = ""
    contact_methods: list[ContactMethod] | None = None
    notification_rules: list[NotificationRule] | None = None
    teams: list[TeamReference] | None = None


@dataclass
class ListContactMethodsResponse(Model):
    """A list of contact methods."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    contact_methods: list[ContactMethod] | None = None


@dataclass
class ListNotificationRulesResponse(Model):
    """A list of notification rules."""

    notification_rules: list[NotificationRule] | None = None


@dataclass
class ListUsersOptions(Model):
    """Query options for listing users."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    include: list[str] | None = None
    query: str = ""
    team_ids: list[str] | None = None


@dataclass
class ListUsersResponse(Model):
    """A list of users."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    users: list[User] | None = None


@dataclass
class ListFullUsersResponse(Model):
    """A list of users with their associations."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    users: list[FullUser] | None = None


@dataclass
class GetUserOptions(Model):
    """Query options for fetching a user."""

    include: list[str] | None = None


def is_same_user(existing: User, new: User) -> bool:
    """Whether an existing user matches one that was to be created."""
    return (
        existing.email == new.email
        and existing.name == new.name
        and existing.role == new.role
    )


def is_same_contact_method(existing: ContactMethod, new: ContactMethod) -> bool:
    """Whether an existing contact method matches one that was to be created."""
    return (
        existing.type == new.type
        and existing.address == new.address
        and existing.country_code == new.country_code
    )


def _contact_key(rule: NotificationRule) -> tuple[str, str] | None:
    method = rule.contact_method
    return None if method is None else (method.type, method.id)


def is_same_notification_rule(existing: NotificationRule, new: NotificationRule) -> bool:
    """Whether an existing notification rule matches one that was to be created."""
    return (
        existing.urgency == new.urgency
        and existing.start_delay_in_minutes == new.start_delay_in_minutes
        and _contact_key(existing) == _contact_key(new)
    )