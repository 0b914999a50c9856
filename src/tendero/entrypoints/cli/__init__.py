"""The ``tendero`` command-line interface."""
