"""Bootstrap (composition root) for TENDERO.

Assembles the application at runtime: picks the adapters (in-memory stores,
optional snapshot persistence, advisor), binds them to the service-layer
handlers and hands back an `AppContainer`.

Import rules:
- Entry points import *this* package and `tendero.service_layer.commands`
  (never adapters or interfaces directly).
- This package may import: `tendero.adapters`, `tendero.service_layer`,
  `tendero.interfaces`, `tendero.domain`, and `tendero.config`.
- Inner layers must not import `tendero.bootstrap`.
"""

from tendero.interfaces.snapshot_store import SnapshotStoreError

from .bootstrap import AppContainer, bootstrap, store_slug

__all__ = ["AppContainer", "SnapshotStoreError", "bootstrap", "store_slug"]
