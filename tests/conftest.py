"""Global pytest fixtures for TENDERO."""

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]
