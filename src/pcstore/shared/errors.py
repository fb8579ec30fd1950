"""Domain failure taxonomy.

Every failure a command handler can report is a ``StoreError`` carrying an
``ErrorKind``. Handlers raise them inside their unit of work, which discards
any pending changes, and the application boundary turns them into ``Result``
values (see ``pcstore.shared.result``).
"""

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    UNAUTHORIZED = "Unauthorized"
    INVALID = "Invalid"
    UNKNOWN = "Unknown"


class StoreError(Exception):
    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, entity_id=None):
        super().__init__(message)
        self.message = message
        self.entity_id = str(entity_id) if entity_id is not None else None

    def __str__(self) -> str:
        return self.message


class NotFoundError(StoreError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(StoreError):
    kind = ErrorKind.CONFLICT


class UnauthorizedError(StoreError):
    kind = ErrorKind.UNAUTHORIZED


class UnknownError(StoreError):
    """Unexpected failure. The original exception is chained as ``__cause__``."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, entity_id=None, cause: Exception | None = None):
        super().__init__(message, entity_id)
        self.__cause__ = cause

    @property
    def cause(self):
        return self.__cause__


class InvalidRequest(StoreError):
    kind = ErrorKind.INVALID

    def __init__(self, messages):
        self.messages = messages
        super().__init__(f"Invalid request: {messages}")


class ConcurrentModification(ConflictError):
    """Another request changed the same aggregate first. Safe to retry."""

    def __init__(self, entity_id=None):
        super().__init__("The resource was modified concurrently, please retry", entity_id)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class ProductNotFound(NotFoundError):
    def __init__(self, product_id):
        super().__init__(f"Product under id: {product_id} not found", product_id)


class CategoryNotFound(NotFoundError):
    def __init__(self, category_id):
        super().__init__(f"Category under id: {category_id} not found", category_id)


class CategoryHasRelatedProducts(ConflictError):
    def __init__(self, category_id):
        super().__init__(f"Category under id: {category_id} has related products", category_id)


class ManufacturerNotFound(NotFoundError):
    def __init__(self, manufacturer_id):
        super().__init__(f"Manufacturer under id: {manufacturer_id} not found", manufacturer_id)


class ManufacturerHasRelatedProducts(ConflictError):
    def __init__(self, manufacturer_id):
        super().__init__(f"Manufacturer under id: {manufacturer_id} has related products", manufacturer_id)


class ProductImageNotFound(NotFoundError):
    def __init__(self, image_id):
        super().__init__(f"Product image under id: {image_id} not found", image_id)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------
class CartItemNotFound(NotFoundError):
    def __init__(self, cart_item_id):
        super().__init__(f"Cart item under id: {cart_item_id} not found", cart_item_id)


class QuantityExceedsStock(ConflictError):
    def __init__(self, product_id, requested: int, available: int):
        super().__init__(
            f"Requested quantity exceeds stock for product under id: {product_id} "
            f"(requested {requested}, available {available})",
            product_id,
        )
        self.requested = requested
        self.available = available


class OrderNotFound(NotFoundError):
    def __init__(self, order_id):
        super().__init__(f"Order under id: {order_id} not found", order_id)


class OrderUserNotFound(NotFoundError):
    def __init__(self, user_id):
        super().__init__(f"User under id: {user_id} not found", user_id)


class OrderUserCartIsEmpty(ConflictError):
    def __init__(self, user_id):
        super().__init__(f"Cart of user under id: {user_id} is empty", user_id)


class OrderUnknown(UnknownError):
    def __init__(self, order_id, cause: Exception):
        super().__init__(f"Order under id: {order_id} unknown exception", order_id, cause)


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------
class UserNotFound(NotFoundError):
    def __init__(self, user_id):
        super().__init__(f"User under id: {user_id} not found", user_id)


class UserByThisEmailAlreadyExists(ConflictError):
    def __init__(self, email):
        super().__init__(f"User with email: {email} already exists")


class EmailOrPasswordIncorrect(UnauthorizedError):
    # Same error for unknown email and wrong password
    def __init__(self):
        super().__init__("Email or password are incorrect")


class InvalidToken(UnauthorizedError):
    def __init__(self):
        super().__init__("Invalid refresh token")


class TokenExpired(UnauthorizedError):
    def __init__(self):
        super().__init__("Refresh token has expired")


class InvalidAccessToken(UnauthorizedError):
    def __init__(self):
        super().__init__("Invalid access token")


class AuthenticationUnknown(UnknownError):
    def __init__(self, user_id, cause: Exception):
        super().__init__(f"Authentication for user under id: {user_id} failed unexpectedly", user_id, cause)
