"""Client for the PagerDuty REST API: an HTTP transport, dataclass models and endpoint services for rulesets, schedules, teams, users, tags, vendors, service dependencies, Slack connections and webhook subscriptions."""

__version__ = "0.1.0"