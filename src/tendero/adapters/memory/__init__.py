"""In-memory store adapters sharing one `InMemoryStoreData`."""

from .catalog import InMemoryProductCatalog
from .journal import InMemorySalesJournal
from .ledger import InMemoryCustomerLedger
from .store import InMemoryStoreData

__all__ = [
    "InMemoryCustomerLedger",
    "InMemoryProductCatalog",
    "InMemorySalesJournal",
    "InMemoryStoreData",
]
