"""Domain-layer error definitions.

Three families of errors cross the service layer boundary:

* `ValidationError`: bad input (negative price, non-positive amount,
  missing customer for a credit sale, ...). Always raised before any write.
* `NotFoundError`: an id that does not reference a known entity.
* `ConcurrencyConflict`: the live state changed between validation and
  commit (e.g. stock edited while a checkout was in flight).

Messages are meant to be shown to the shopkeeper as-is.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when input violates a domain rule."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Raised when an id does not reference a known entity."""

    def __init__(self, kind: str, entity_id: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind.capitalize()} ({entity_id}) not found"
        super().__init__(message)
        self.kind = kind
        self.entity_id = entity_id


class ConcurrencyConflict(DomainError):
    """Raised when live state no longer satisfies a check made earlier."""


# ============================================================================
#                           Entity-specific errors
# ============================================================================


class ProductNotFoundError(NotFoundError):
    """Raised when a product cannot be found in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__("product", product_id)


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer cannot be found in the ledger."""

    def __init__(self, customer_id: str) -> None:
        super().__init__("customer", customer_id)


class SaleNotFoundError(NotFoundError):
    """Raised when a sale cannot be found in the journal."""

    def __init__(self, sale_id: str) -> None:
        super().__init__("sale", sale_id)


def _stock_message(product_name: str, requested: int, available: int) -> str:
    return (
        f"Not enough stock for {product_name}: requested {requested}, "
        f"only {available} available"
    )


class OutOfStockError(ValidationError):
    """Raised when a cart asks for more units than the catalog holds."""

    def __init__(
        self, product_id: str, product_name: str, requested: int, available: int
    ) -> None:
        super().__init__(
            _stock_message(product_name, requested, available), field="quantity"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class InsufficientStockError(ConcurrencyConflict):
    """Raised when stock dropped below the requested quantity after validation."""

    def __init__(
        self, product_id: str, product_name: str, requested: int, available: int
    ) -> None:
        super().__init__(_stock_message(product_name, requested, available))
        self.product_id = product_id
        self.requested = requested
        self.available = available
