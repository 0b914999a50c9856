"""TENDERO test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a SQLite database through SQLAlchemy/Alembic.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- e2e/          : The `tendero` command driven through click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration hits a real (temporary) database with per-test setup/teardown.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, contract, property, e2e
"""
