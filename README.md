# pdapi

A Python client for the PagerDuty REST API. It covers schedules and
overrides, teams and their members, users with their contact methods,
notification rules and licences, event rulesets and their rules, tags,
vendors, service dependencies, Slack connections and webhook subscriptions.

## Installation

```
pip install pdapi
```

For running the test suite:

```
pip install "pdapi[test]"
pytest
```

## Getting started

All requests go through `pdapi.api.ApiClient`, which holds the API token,
the base URL (by default `https://api.pagerduty.com`) and a
`requests.Session`. Each group of endpoints is a service class that takes
that client:

```python
from pdapi.api import ApiClient
from pdapi.teams import Team, TeamService
from pdapi.schedules import ScheduleService, ListSchedulesOptions

api = ApiClient(token="token")

teams = TeamService(api)
team = teams.create(Team(name="Platform"))
teams.add_user_with_role(team.id, "PUSER01", "manager")

schedules = ScheduleService(api)
for schedule in schedules.list(ListSchedulesOptions(query="primary")).schedules or []:
    print(schedule.id, schedule.name)
```

The service classes are:

| Module                | Class                        |
|-----------------------|------------------------------|
| `pdapi.rulesets`      | `RulesetService`             |
| `pdapi.schedules`     | `ScheduleService`            |
| `pdapi.teams`         | `TeamService`                |
| `pdapi.users`         | `UserService`                |
| `pdapi.tags`          | `TagService`                 |
| `pdapi.vendors`       | `VendorService`              |
| `pdapi.dependencies`  | `ServiceDependencyService`   |
| `pdapi.slack`         | `SlackConnectionService`     |
| `pdapi.webhooks`      | `WebhookSubscriptionService` |

User models (`User`, `ContactMethod`, `NotificationRule`, `License` and the
list options and responses) live in `pdapi.user_models`; shared reference
types such as `UserReference` and `TeamReference` live in `pdapi.model`.

## Models

Requests and responses are dataclasses derived from `pdapi.model.Model`.
Every model converts both ways with `to_dict()` and `Model.from_dict(data)`.
Fields left empty are not sent, except those the API expects to be present
even when empty or null (for example a schedule layer's `end`, a rule's
`disabled` flag or a notification rule's `start_delay_in_minutes`). Unknown
keys and nulls in responses are ignored. The JSON key `self` is held in the
attribute `self_url`.

Option models passed as `options` are sent as query parameters; list values
go out as repeated `key[]` parameters (see `pdapi.api.encode_query`).

## Errors

A response with an HTTP status of 400 or above raises `pdapi.api.APIError`,
which holds `status_code`, `code`, `message`, the `errors` list the API sent
back, and the request's `method` and `url`.

```python
from pdapi.api import APIError
from pdapi.users import UserService

try:
    UserService(api).get("PXXXXXX")
except APIError as exc:
    print(exc.status_code, exc.errors)
```

`ServiceDependencyService.get_for_type` raises `ValueError` for a service
type it does not know, and the duplicate recovery described below raises
`LookupError` when the existing object cannot be found.

## Convenience behaviour

- `UserService.create`, `create_contact_method` and
  `create_notification_rule` return the object that already exists when the
  API rejects the new one as a duplicate and an existing object with the
  same details is found.
- `UserService.update_contact_method` works around a duplicate contact
  method by deleting the matching one and retrying the update.
- `UserService.get_with_license` returns a user with a reference to the
  assigned licence filled in; `list_all` walks every page of users.
- `list` on rulesets, tags, webhook subscriptions and Slack connections,
  `TagService.list_for_entity` and `TeamService.get_members` follow the
  API's pagination until every page is read. The `options` they accept do
  not narrow the listing.
- `SlackConnectionService.create` sets `workspace_id` on the returned
  connection.
- `ServiceDependencyService.get_for_type` looks up dependencies for business
  services (`business_service`, `business_service_reference`) or technical
  services (`service`, `technical_service_reference`).

## Lower-level access

`ApiClient.request` sends any request when an endpoint has no wrapper, and
`ApiClient.paged_get` collects every page of a list endpoint:

```python
from pdapi.api import ApiClient

api = ApiClient(token="token")
response = api.request("GET", "/abilities")
print(response.json())
```

## What the package does not do

- There are no wrappers for technical services themselves, their
  integrations or their event rules, and no single client object bundling
  all endpoint groups; build each service class from an `ApiClient`, and use
  `ApiClient.request` for the endpoints that have no wrapper.
- Nothing is cached: every call goes to the API.
- There is no command-line tool.