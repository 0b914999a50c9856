"""End-to-end tests.

Purpose
- Drive the `tendero` command the way a shopkeeper would, through click's
  CliRunner, against a temporary SQLite database.
"""
