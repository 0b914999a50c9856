"""Integration tests.

Purpose
- Exercise real interactions with external systems (the SQLite database and Alembic migrations).

Guidelines
- Use realistic configuration and setup/teardown per test or suite.
- Minimize mocking; prefer real services or well-scoped test containers.
- Mark as 'integration' and keep them slower but reliable.
"""
