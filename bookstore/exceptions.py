"""Bookstore exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "INVALID_QUANTITY": "Quantity must be positive",
    "INSUFFICIENT_STOCK": "Insufficient stock",
    "NOT_FOR_SALE": "Showcase books are not for sale",
    "NOT_FOUND": "Book not found in inventory",
    "NOT_PURCHASABLE": "Book is not available for purchase",
    "INVALID_CATALOG_FILE": "Invalid catalog file",
}


class BookstoreError(Exception):
    """
    Structured exception for bookstore operations.

    Usage:
        try:
            amount = store.buy("978-0134685991", 2, email, address)
        except BookstoreError as e:
            if e.code == "INSUFFICIENT_STOCK":
                print(f"Only {e.data['available']} left")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }


class InvalidQuantity(BookstoreError):
    def __init__(self, quantity: int) -> None:
        super().__init__("INVALID_QUANTITY", quantity=quantity)


class InsufficientStock(BookstoreError):
    def __init__(self, available: int, requested: int) -> None:
        super().__init__(
            "INSUFFICIENT_STOCK",
            f"Insufficient stock. Available: {available}, Requested: {requested}",
            available=available,
            requested=requested,
        )

    @property
    def available(self) -> int:
        return self.data["available"]

    @property
    def requested(self) -> int:
        return self.data["requested"]


class NotForSale(BookstoreError):
    def __init__(self, identifier: str) -> None:
        super().__init__("NOT_FOR_SALE", identifier=identifier)


class NotFound(BookstoreError):
    def __init__(self, identifier: str) -> None:
        super().__init__(
            "NOT_FOUND",
            f"Book with ISBN {identifier} not found in inventory",
            identifier=identifier,
        )

    @property
    def identifier(self) -> str:
        return self.data["identifier"]


class NotPurchasable(BookstoreError):
    def __init__(self, title: str) -> None:
        super().__init__(
            "NOT_PURCHASABLE",
            f"Book {title} is not available for purchase",
            title=title,
        )


class CatalogFileError(BookstoreError):
    """Raised when a catalog file cannot be read or validated."""

    def __init__(self, message: str, **data: Any) -> None:
        super().__init__("INVALID_CATALOG_FILE", message, **data)
