"""Global pytest fixtures for RATIOLINT."""

pytest_plugins = [
    "tests.fixtures.cases",
]
