from .exceptions import (
    BookstoreError,
    CatalogFileError,
    InsufficientStock,
    InvalidQuantity,
    NotForSale,
    NotFound,
    NotPurchasable,
)
from .model import AudioBook, EBook, Item, PaperBook, ShowcaseBook
from .services import DeliveryServices
from .store import Bookstore

__all__ = [
    "AudioBook",
    "Bookstore",
    "BookstoreError",
    "CatalogFileError",
    "DeliveryServices",
    "EBook",
    "InsufficientStock",
    "InvalidQuantity",
    "Item",
    "NotForSale",
    "NotFound",
    "NotPurchasable",
    "PaperBook",
    "ShowcaseBook",
]
