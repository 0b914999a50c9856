"""TENDERO

A transaction engine for small neighbourhood stores. It keeps the product
catalog, the sales journal and the customers' credit ("fiado") ledger
consistent with each other at every checkout, and computes the dashboard
figures the shopkeeper looks at during the day.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
