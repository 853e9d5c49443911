"""Rulesets and their event rules."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient, Response
from pdapi.model import Model, Reference, wire


@dataclass
class RulesetObject(Model):
    """A generic object referenced from a ruleset."""

    type: str = ""
    id: str = ""


@dataclass
class Ruleset(Model):
    """A ruleset."""

    id: str = ""
    name: str = ""
    type: str = ""
    routing_keys: list[str] | None = None
    team: RulesetObject | None = None
    updater: RulesetObject | None = None
    creator: RulesetObject | None = None


@dataclass
class ListRulesetsResponse(Model):
    """A list of rulesets."""

    total: int = 0
    rulesets: list[Ruleset] | None = None
    offset: int = 0
    more: bool = False
    limit: int = 0


@dataclass
class ConditionParameter(Model):
    """Parameters of a rule condition."""

    path: str = ""
    value: str = ""


@dataclass
class RuleSubcondition(Model):
    """A subcondition of a rule condition."""

    operator: str = ""
    parameters: ConditionParameter | None = None


@dataclass
class RuleConditions(Model):
    """The conditions of a rule."""

    operator: str = ""
    subconditions: list[RuleSubcondition] | None = None


@dataclass
class ScheduledWeekly(Model):
    """A weekly schedule for a rule."""

    weekdays: list[int] | None = None
    timezone: str = ""
    start_time: int = 0
    duration: int = 0


@dataclass
class ActiveBetween(Model):
    """A fixed period during which a rule is active."""

    start_time: int = 0
    end_time: int = 0


@dataclass
class RuleTimeFrame(Model):
    """When a rule applies."""

    scheduled_weekly: ScheduledWeekly | None = None
    active_between: ActiveBetween | None = None


@dataclass
class RuleVariableParameter(Model):
    """A parameter of a rule variable."""

    value: str = wire(keep=True, default="")
    path: str = wire(keep=True, default="")


@dataclass
class RuleVariable(Model):
    """A variable of a rule."""

    name: str = ""
    type: str = ""
    parameters: RuleVariableParameter | None = None


@dataclass
class RuleActionParameter(Model):
    """A string parameter of a rule action."""

    value: str = ""


@dataclass
class RuleActionIntParameter(Model):
    """An integer parameter of a rule action."""

    value: int = wire(keep=True, default=0)


@dataclass
class RuleActionSuppress(Model):
    """A suppress action."""

    value: bool = wire(keep=True, default=False)
    threshold_value: int = 0
    threshold_time_unit: str = ""
    threshold_time_amount: int = 0


@dataclass
class RuleActionExtraction(Model):
    """An extraction action."""

    target: str = ""
    source: str = ""
    regex: str = ""
    template: str = ""


@dataclass
class RuleActions(Model):
    """The actions of a rule; unset actions are sent as null."""

    suppress: RuleActionSuppress | None = wire(keep=True)
    annotate: RuleActionParameter | None = wire(keep=True)
    severity: RuleActionParameter | None = wire(keep=True)
    priority: RuleActionParameter | None = wire(keep=True)
    route: RuleActionParameter | None = wire(keep=True)
    event_action: RuleActionParameter | None = wire(keep=True)
    extractions: list[RuleActionExtraction] | None = None
    suspend: RuleActionIntParameter | None = wire(keep=True)


@dataclass
class RulesetRule(Model):
    """A rule in a ruleset."""

    id: str = ""
    position: int | None = None
    disabled: bool = wire(keep=True, default=False)
    conditions: RuleConditions | None = None
    actions: RuleActions | None = None
    ruleset: Reference | None = None
    self_url: str = wire("self", default="")
    catch_all: bool = False
    time_frame: RuleTimeFrame | None = None
    variables: list[RuleVariable] | None = None


@dataclass
class ListRulesetRulesResponse(Model):
    """A list of rules in a ruleset."""

    total: int = 0
    rules: list[RulesetRule] | None = None
    offset: int = 0
    more: bool = False
    limit: int = 0


class RulesetService:
    """Ruleset endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self) -> ListRulesetsResponse:
        """List every ruleset, across all pages."""
        return ListRulesetsResponse(
            rulesets=self._api.paged_get("/rulesets", "rulesets", Ruleset)
        )

    def create(self, ruleset: Ruleset) -> Ruleset | None:
        """Create a ruleset."""
        response = self._api.request(
            "POST", "/rulesets", body={"ruleset": ruleset.to_dict()}
        )
        return Ruleset.from_dict(response.json().get("ruleset"))

    def get(self, ruleset_id: str) -> Ruleset | None:
        """Fetch a ruleset."""
        response = self._api.request("GET", f"/rulesets/{ruleset_id}")
        return Ruleset.from_dict(response.json().get("ruleset"))

    def delete(self, ruleset_id: str) -> Response:
        """Delete a ruleset."""
        return self._api.request("DELETE", f"/rulesets/{ruleset_id}")

    def update(self, ruleset_id: str, ruleset: Ruleset) -> Ruleset | None:
        """Update a ruleset."""
        response = self._api.request(
            "PUT", f"/rulesets/{ruleset_id}", body={"ruleset": ruleset.to_dict()}
        )
        return Ruleset.from_dict(response.json().get("ruleset"))

    def list_rules(self, ruleset_id: str) -> ListRulesetRulesResponse | None:
        """List the event rules of a ruleset."""
        response = self._api.request("GET", f"/rulesets/{ruleset_id}/rules")
        return ListRulesetRulesResponse.from_dict(response.json())

    def create_rule(self, ruleset_id: str, rule: RulesetRule) -> RulesetRule | None:
        """Create an event rule in a ruleset."""
        response = self._api.request(
            "POST", f"/rulesets/{ruleset_id}/rules", body={"rule": rule.to_dict()}
        )
        return RulesetRule.from_dict(response.json().get("rule"))

    def get_rule(self, ruleset_id: str, rule_id: str) -> RulesetRule | None:
        """Fetch an event rule of a ruleset."""
        response = self._api.request("GET", f"/rulesets/{ruleset_id}/rules/{rule_id}")
        return RulesetRule.from_dict(response.json().get("rule"))

    def update_rule(
        self, ruleset_id: str, rule_id: str, rule: RulesetRule
    ) -> RulesetRule | None:
        """Update an event rule of a ruleset."""
        response = self._api.request(
            "PUT",
            f"/rulesets/{ruleset_id}/rules/{rule_id}",
            body={"rule": rule.to_dict()},
        )
        return RulesetRule.from_dict(response.json().get("rule"))

    def delete_rule(self, ruleset_id: str, rule_id: str) -> Response:
        """Delete an event rule from a ruleset."""
        return self._api.request("DELETE", f"/rulesets/{ruleset_id}/rules/{rule_id}")