"""Entry points (CLI) for TENDERO."""
