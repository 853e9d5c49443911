"""User endpoints, with recovery from duplicate creations."""

from __future__ import annotations

import logging
from dataclasses import replace

from pdapi.api import APIError, ApiClient, Response
from pdapi.model import LicenseReference
from pdapi.user_models import (
    ContactMethod,
    FullUser,
    GetUserOptions,
    License,
    ListContactMethodsResponse,
    ListFullUsersResponse,
    ListNotificationRulesResponse,
    ListUsersOptions,
    ListUsersResponse,
    NotificationRule,
    User,
    is_same_contact_method,
    is_same_notification_rule,
    is_same_user,
)

log = logging.getLogger(__name__)

_EMAIL_TAKEN = "Email has already been taken"
_CONTACT_NOT_UNIQUE = "User Contact method must be unique"
_DELAY_NOT_UNIQUE = "Channel Start delay must be unique for a given contact method"


def _reports(error: APIError, message: str) -> bool:
    return " ".join(str(item) for item in error.errors) == message


class UserService:
    """User endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self, options: ListUsersOptions | None = None) -> ListUsersResponse | None:
        """List users."""
        response = self._api.request("GET", "/users", params=options)
        return ListUsersResponse.from_dict(response.json())

    def list_all(self, options: ListUsersOptions | None = None) -> list[FullUser]:
        """List every user, across all pages, with their associations."""
        options = replace(options) if options is not None else ListUsersOptions()
        users: list[FullUser] = []
        offset = 0
        while True:
            log.debug("getting users at offset %d", offset)
            response = self._api.request("GET", "/users", params=options)
            page = ListFullUsersResponse.from_dict(response.json())
            users.extend(page.users or [])
            if not page.more or not page.limit:
                return users
            offset += page.limit
            options = replace(options, offset=offset)

    def create(self, user: User) -> User | None:
        """Create a user; if the e-mail is taken by the same user, return that one."""
        try:
            response = self._api.request("POST", "/users", body={"user": user.to_dict()})
        except APIError as error:
            if not _reports(error, _EMAIL_TAKEN):
                raise
            return self._find_existing_user(user, error)
        return User.from_dict(response.json().get("user"))

    def _find_existing_user(self, user: User, original: APIError) -> User | None:
        try:
            listing = self.list(ListUsersOptions(query=user.email))
        except APIError as error:
            raise LookupError(
                f"[{_EMAIL_TAKEN}] but failed to fetch existing users: {error}"
            ) from error
        for existing in (listing.users if listing else None) or []:
            if is_same_user(existing, user):
                return self.get(existing.id, GetUserOptions())
        raise original

    def delete(self, user_id: str) -> Response:
        """Delete a user."""
        return self._api.request("DELETE", f"/users/{user_id}")

    def get(self, user_id: str, options: GetUserOptions | None = None) -> User | None:
        """Fetch a user."""
        response = self._api.request("GET", f"/users/{user_id}", params=options)
        return User.from_dict(response.json().get("user"))

    def get_license(self, user_id: str) -> License | None:
        """Fetch the license assigned to a user."""
        response = self._api.request("GET", f"/users/{user_id}/license")
        return License.from_dict(response.json().get("license"))

    def get_with_license(
        self, user_id: str, options: GetUserOptions | None = None
    ) -> User:
        """Fetch a user together with a reference to their license."""
        user = self.get(user_id, options)
        license_ = self.get_license(user_id)
        if user is None or license_ is None:
            raise LookupError(f"user {user_id} or its license was not returned")
        user.license = LicenseReference(id=license_.id, type="license_reference")
        return user

    def get_full(self, user_id: str) -> FullUser | None:
        """Fetch a user with contact methods and notification rules."""
        options = GetUserOptions(include=["contact_methods", "notification_rules"])
        response = self._api.request("GET", f"/users/{user_id}", params=options)
        return FullUser.from_dict(response.json().get("user"))

    def update(self, user_id: str, user: User) -> User | None:
        """Update a user."""
        response = self._api.request(
            "PUT", f"/users/{user_id}", body={"user": user.to_dict()}
        )
        return User.from_dict(response.json().get("user"))

    def list_contact_methods(self, user_id: str) -> ListContactMethodsResponse | None:
        """List the contact methods of a user."""
        response = self._api.request("GET", f"/users/{user_id}/contact_methods")
        return ListContactMethodsResponse.from_dict(response.json())

    def create_contact_method(
        self, user_id: str, contact_method: ContactMethod
    ) -> ContactMethod | None:
        """Create a contact method; if the same one exists, return it instead."""
        try:
            response = self._api.request(
                "POST",
                f"/users/{user_id}/contact_methods",
                body={"contact_method": contact_method.to_dict()},
            )
        except APIError as error:
            if not _reports(error, _CONTACT_NOT_UNIQUE):
                raise
            return self._find_existing_contact_method(user_id, contact_method)
        return ContactMethod.from_dict(response.json().get("contact_method"))

    def _find_existing_contact_method(
        self, user_id: str, contact_method: ContactMethod
    ) -> ContactMethod | None:
        try:
            listing = self.list_contact_methods(user_id)
        except APIError as error:
            raise LookupError(
                f"[{_CONTACT_NOT_UNIQUE}] but failed to fetch existing ones: {error}"
            ) from error
        for existing in (listing.contact_methods if listing else None) or []:
            if is_same_contact_method(existing, contact_method):
                return self.get_contact_method(user_id, existing.id)
        raise LookupError(f"[{_CONTACT_NOT_UNIQUE}]")

    def get_contact_method(
        self, user_id: str, contact_method_id: str
    ) -> ContactMethod | None:
        """Fetch a contact method of a user."""
        response = self._api.request(
            "GET", f"/users/{user_id}/contact_methods/{contact_method_id}"
        )
        return ContactMethod.from_dict(response.json().get("contact_method"))

    def _put_contact_method(
        self, user_id: str, contact_method_id: str, contact_method: ContactMethod
    ) -> ContactMethod | None:
        response = self._api.request(
            "PUT",
            f"/users/{user_id}/contact_methods/{contact_method_id}",
            body={"contact_method": contact_method.to_dict()},
        )
        return ContactMethod.from_dict(response.json().get("contact_method"))

    def update_contact_method(
        self, user_id: str, contact_method_id: str, contact_method: ContactMethod
    ) -> ContactMethod | None:
        """Update a contact method.

        If another contact method already has the same details, it is deleted
        and the update is retried.
        """
        try:
            return self._put_contact_method(user_id, contact_method_id, contact_method)
        except APIError as error:
            if not _reports(error, _CONTACT_NOT_UNIQUE):
                raise
        existing = self._find_existing_contact_method(user_id, contact_method)
        if existing is not None:
            self.delete_contact_method(user_id, existing.id)
        self._put_contact_method(user_id, contact_method_id, contact_method)
        return self._find_existing_contact_method(user_id, contact_method)

    def delete_contact_method(self, user_id: str, contact_method_id: str) -> Response:
        """Delete a contact method of a user."""
        return self._api.request(
            "DELETE", f"/users/{user_id}/contact_methods/{contact_method_id}"
        )

    def list_notification_rules(self, user_id: str) -> ListNotificationRulesResponse | None:
        """List the notification rules of a user."""
        response = self._api.request("GET", f"/users/{user_id}/notification_rules")
        return ListNotificationRulesResponse.from_dict(response.json())

    def create_notification_rule(
        self, user_id: str, rule: NotificationRule
    ) -> NotificationRule | None:
        """Create a notification rule; if the same one exists, return it instead."""
        try:
            response = self._api.request(
                "POST",
                f"/users/{user_id}/notification_rules",
                body={"notification_rule": rule.to_dict()},
            )
        except APIError as error:
            if not _reports(error, _DELAY_NOT_UNIQUE):
                raise
            return self._find_existing_notification_rule(user_id, rule)
        return NotificationRule.from_dict(response.json().get("notification_rule"))

    def _find_existing_notification_rule(
        self, user_id: str, rule: NotificationRule
    ) -> NotificationRule | None:
        try:
            listing = self.list_notification_rules(user_id)
        except APIError as error:
            raise LookupError(
                f"[{_DELAY_NOT_UNIQUE}]. Failed to fetch existing rules: {error}"
            ) from error
        for existing in (listing.notification_rules if listing else None) or []:
            if is_same_notification_rule(existing, rule):
                return self.get_notification_rule(user_id, existing.id)
        raise LookupError(f"[{_DELAY_NOT_UNIQUE}]")

    def get_notification_rule(self, user_id: str, rule_id: str) -> NotificationRule | None:
        """Fetch a notification rule of a user."""
        response = self._api.request(
            "GET", f"/users/{user_id}/notification_rules/{rule_id}"
        )
        return NotificationRule.from_dict(response.json().get("notification_rule"))

    def update_notification_rule(
        self, user_id: str, rule_id: str, rule: NotificationRule
    ) -> NotificationRule | None:
        """Update a notification rule of a user."""
        response = self._api.request(
            "PUT",
            f"/users/{user_id}/notification_rules/{rule_id}",
            body={"notification_rule": rule.to_dict()},
        )
        return NotificationRule.from_dict(response.json().get("notification_rule"))

    def delete_notification_rule(self, user_id: str, rule_id: str) -> Response:
        """Delete a notification rule of a user."""
        return self._api.request(
            "DELETE", f"/users/{user_id}/notification_rules/{rule_id}"
        )