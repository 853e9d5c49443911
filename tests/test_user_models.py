from pdapi.api import encode_query
from pdapi.model import ContactMethodReference, LicenseReference
from pdapi.user_models import (
    ContactMethod,
    FullUser,
    GetUserOptions,
    License,
    ListUsersOptions,
    ListUsersResponse,
    NotificationRule,
    PushContactMethodSound,
    User,
    is_same_contact_method,
    is_same_notification_rule,
    is_same_user,
)


def test_notification_rule_keeps_zero_start_delay():
    rule = NotificationRule(urgency="high")
    assert rule.to_dict() == {"start_delay_in_minutes": 0, "urgency": "high"}


def test_user_self_field_uses_wire_name():
    user = User(id="1", self_url="api/users/1")
    assert user.to_dict() == {"id": "1", "self": "api/users/1"}


def test_user_round_trip_with_license():
    user = User(
        id="1",
        name="foo",
        email="foo@example.com",
        license=LicenseReference(id="1", type="license_reference"),
    )
    assert User.from_dict(user.to_dict()) == user


def test_user_decodes_nested_license():
    user = User.from_dict({"id": "1", "license": {"id": "1", "type": "license_reference"}})
    assert user.license == LicenseReference(id="1", type="license_reference")


def test_license_from_dict():
    assert License.from_dict({"id": "1", "type": "license"}) == License(id="1", type="license")


def test_full_user_decodes_contact_methods():
    data = {
        "id": "1",
        "contact_methods": [
            {"id": "c1", "type": "push_notification_contact_method",
             "sounds": [{"type": "alert_high_urgency", "file": "bell"}]}
        ],
        "notification_rules": [{"id": "n1", "start_delay_in_minutes": 5}],
    }
    user = FullUser.from_dict(data)
    assert user.contact_methods[0].sounds == [
        PushContactMethodSound(type="alert_high_urgency", file="bell")
    ]
    assert user.notification_rules[0].start_delay_in_minutes == 5


def test_list_users_response_from_dict():
    response = ListUsersResponse.from_dict({"users": [{"id": "P1D3Z4B"}]})
    assert response == ListUsersResponse(users=[User(id="P1D3Z4B")])


def test_list_users_options_query_uses_brackets():
    options = ListUsersOptions(include=["contact_methods"], query="foo")
    assert encode_query(options) == [("include[]", "contact_methods"), ("query", "foo")]


def test_get_user_options_query():
    options = GetUserOptions(include=["contact_methods", "notification_rules"])
    assert encode_query(options) == [
        ("include[]", "contact_methods"),
        ("include[]", "notification_rules"),
    ]


def test_is_same_user_ignores_id():
    existing = User(id="1", name="foo", email="foo@example.com")
    new = User(name="foo", email="foo@example.com")
    assert is_same_user(existing, new)
    assert not is_same_user(existing, User(name="bar", email="foo@example.com"))


def test_is_same_contact_method():
    existing = ContactMethod(
        id="1", type="email_contact_method", address="foo@example.com", self_url="x"
    )
    new = ContactMethod(type="email_contact_method", address="foo@example.com")
    assert is_same_contact_method(existing, new)
    assert not is_same_contact_method(existing, ContactMethod(type="email_contact_method"))


def test_is_same_notification_rule():
    existing = NotificationRule(
        id="n1",
        urgency="high",
        contact_method=ContactMethodReference(id="c1", type="phone_contact_method"),
    )
    new = NotificationRule(
        urgency="high",
        contact_method=ContactMethodReference(id="c1", type="phone_contact_method"),
    )
    other = NotificationRule(
        urgency="high",
        contact_method=ContactMethodReference(id="c2", type="phone_contact_method"),
    )
    assert is_same_notification_rule(existing, new)
    assert not is_same_notification_rule(existing, other)