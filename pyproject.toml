[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdapi"
version = "0.1.0"
description = "Client library for the PagerDuty REST API: schedules, teams, users, rulesets, tags, vendors, service dependencies, Slack connections and webhook subscriptions"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["pagerduty", "api", "client", "incident", "on-call", "rest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["pdapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
