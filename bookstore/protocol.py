from decimal import Decimal
from typing import TYPE_CHECKING, runtime_checkable, Protocol

if TYPE_CHECKING:
    from .model import AudioBook, EBook, Item, PaperBook


@runtime_checkable
class ShippingService(Protocol):
    def ship(self, book: "PaperBook", quantity: int, address: str) -> None: ...


@runtime_checkable
class MailService(Protocol):
    def send_ebook(self, book: "EBook", quantity: int, email: str) -> None: ...


@runtime_checkable
class AudioService(Protocol):
    def send_audio_book(self, book: "AudioBook", quantity: int, email: str) -> None: ...


@runtime_checkable
class Catalog(Protocol):
    def add(self, item: "Item") -> None: ...
    def get(self, identifier: str) -> "Item | None": ...
    def list_all(self) -> list["Item"]: ...
    def remove_outdated(self, years_threshold: int) -> list["Item"]: ...
    def buy(self, identifier: str, quantity: int, email: str, address: str) -> Decimal: ...
