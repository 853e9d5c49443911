import json
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from pdapi.api import APIError, ApiClient
from pdapi.model import TeamReference, UserReference
from pdapi.teams import (
    GetMembersOptions,
    GetMembersResponse,
    ListTeamsOptions,
    ListTeamsResponse,
    Member,
    Team,
    TeamService,
)

BASE = "https://api.example.com"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def teams():
    return TeamService(ApiClient("token", base_url=BASE))


def _body(call):
    return json.loads(call.request.body)


def test_list(mocked, teams):
    mocked.add(responses.GET, f"{BASE}/teams", json={"teams": [{"id": "1"}]})
    assert teams.list(ListTeamsOptions()) == ListTeamsResponse(teams=[Team(id="1")])


def test_create(mocked, teams):
    mocked.add(responses.POST, f"{BASE}/teams", json={"team": {"name": "foo", "id": "1"}})
    team = Team(name="foo")
    result = teams.create(team)
    assert Team.from_dict(_body(mocked.calls[0])["team"]) == team
    assert result == Team(name="foo", id="1")


def test_create_with_parent(mocked, teams):
    mocked.add(
        responses.POST,
        f"{BASE}/teams",
        json={
            "team": {
                "name": "foo",
                "id": "1",
                "parent": {"id": "1", "type": "team_reference"},
            }
        },
    )
    parent = TeamReference(id="1", type="team_reference")
    team = Team(name="foo", parent=parent)
    result = teams.create(team)
    assert _body(mocked.calls[0]) == {
        "team": {"name": "foo", "parent": {"id": "1", "type": "team_reference"}}
    }
    assert result == Team(name="foo", id="1", parent=parent)


def test_delete(mocked, teams):
    mocked.add(responses.DELETE, f"{BASE}/teams/1", status=204)
    assert teams.delete("1").status_code == 204


def test_get(mocked, teams):
    mocked.add(responses.GET, f"{BASE}/teams/1", json={"team": {"id": "1"}})
    assert teams.get("1") == Team(id="1")


def test_update(mocked, teams):
    mocked.add(responses.PUT, f"{BASE}/teams/1", json={"team": {"name": "foo", "id": "1"}})
    team = Team(name="foo")
    result = teams.update("1", team)
    assert Team.from_dict(_body(mocked.calls[0])["team"]) == team
    assert result == Team(name="foo", id="1")


def test_add_user(mocked, teams):
    mocked.add(responses.PUT, f"{BASE}/teams/1/users/1")
    assert teams.add_user("1", "1").status_code == 200
    assert mocked.calls[0].request.method == "PUT"


@pytest.mark.parametrize(
    "role, expected",
    [
        ("responder", {"role": "responder"}),
        ("observer", {"role": "observer"}),
        ("manager", {"role": "manager"}),
        ("", {}),
        ("garbage", {"role": "garbage"}),
    ],
)
def test_add_user_with_role(mocked, teams, role, expected):
    mocked.add(responses.PUT, f"{BASE}/teams/1/users/1")
    assert teams.add_user_with_role("1", "1", role).status_code == 200
    assert _body(mocked.calls[0]) == expected


def test_remove_user(mocked, teams):
    mocked.add(responses.DELETE, f"{BASE}/teams/1/users/1")
    assert teams.remove_user("1", "1").status_code == 200
    assert mocked.calls[0].request.method == "DELETE"


def test_get_members(mocked, teams):
    mocked.add(
        responses.GET,
        f"{BASE}/teams/1/members",
        json={"members": [{"user": {"id": "1"}, "role": "manager"}]},
    )
    result = teams.get_members("1", GetMembersOptions())
    assert result == GetMembersResponse(
        members=[Member(user=UserReference(id="1"), role="manager")]
    )


def test_paged_get_members(mocked, teams):
    def page(request):
        query = parse_qs(urlparse(request.url).query)
        if query.get("offset") == ["1"]:
            body = {
                "members": [{"user": {"id": "2"}, "role": "observer"}],
                "limit": 1,
                "offset": 1,
                "more": False,
            }
        else:
            body = {
                "members": [{"user": {"id": "1"}, "role": "manager"}],
                "limit": 1,
                "offset": 0,
                "more": True,
            }
        return 200, {}, json.dumps(body)

    mocked.add_callback(responses.GET, f"{BASE}/teams/1/members", callback=page)
    result = teams.get_members("1", GetMembersOptions())
    assert result == GetMembersResponse(
        members=[
            Member(user=UserReference(id="1"), role="manager"),
            Member(user=UserReference(id="2"), role="observer"),
        ]
    )
    assert len(mocked.calls) == 2


def test_add_escalation_policy(mocked, teams):
    mocked.add(responses.PUT, f"{BASE}/teams/1/escalation_policies/1")
    assert teams.add_escalation_policy("1", "1").status_code == 200
    assert mocked.calls[0].request.method == "PUT"


def test_remove_escalation_policy(mocked, teams):
    mocked.add(responses.DELETE, f"{BASE}/teams/1/escalation_policies/1")
    assert teams.remove_escalation_policy("1", "1").status_code == 200
    assert mocked.calls[0].request.method == "DELETE"


def test_get_missing_team_raises(mocked, teams):
    mocked.add(
        responses.GET,
        f"{BASE}/teams/9",
        status=404,
        json={"error": {"message": "Not Found", "code": 2100}},
    )
    with pytest.raises(APIError) as info:
        teams.get("9")
    assert info.value.status_code == 404
    assert info.value.code == 2100