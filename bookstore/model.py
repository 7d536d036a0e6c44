"""Catalog items and their purchase rules."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import ClassVar, Literal
import logging

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InsufficientStock, InvalidQuantity, NotForSale
from .services import DeliveryServices


class Item(BaseModel, ABC):
    """Base class for all book types."""

    model_config = ConfigDict(validate_assignment=True)

    label: ClassVar[str]

    kind: str
    identifier: str = Field(min_length=1, frozen=True)
    title: str
    author: str
    year: int = Field(frozen=True)
    unit_price: Decimal = Field(ge=0, frozen=True)

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(self.__module__)

    def category(self) -> str:
        return self.label

    @abstractmethod
    def is_purchasable(self) -> bool:
        """Whether a purchase may currently succeed."""
        pass

    @abstractmethod
    def purchase(
        self,
        quantity: int,
        email: str,
        address: str,
        services: DeliveryServices | None = None,
    ) -> Decimal:
        """Process a purchase and return the amount charged."""
        pass

    def details(self) -> str:
        """Variant specific annotation for inventory listings."""
        return ""

    def _check_quantity(self, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

    def __str__(self) -> str:
        return f"{self.title} by {self.author} ({self.year}) - ISBN: {self.identifier}"


class PaperBook(Item):
    label = "Paper Book"

    kind: Literal["paper"] = "paper"
    stock: int = Field(default=0, ge=0)

    def is_purchasable(self) -> bool:
        return self.stock > 0

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str,
        services: DeliveryServices | None = None,
    ) -> Decimal:
        self._check_quantity(quantity)
        if self.stock < quantity:
            raise InsufficientStock(available=self.stock, requested=quantity)

        self.stock -= quantity
        total_amount = self.unit_price * quantity

        (services or DeliveryServices()).shipping.ship(self, quantity, address)

        self.logger.info(
            f"Paper book purchase processed. Remaining stock: {self.stock}"
        )
        return total_amount

    def restock(self, count: int) -> None:
        """Add copies to the shelf."""
        self._check_quantity(count)
        self.stock += count
        self.logger.info(f"Restocked '{self.title}'. Stock: {self.stock}")

    def details(self) -> str:
        return f"Stock: {self.stock}"


class EBook(Item):
    label = "EBook"

    kind: Literal["ebook"] = "ebook"
    file_type: str

    def is_purchasable(self) -> bool:
        # EBooks are always available
        return True

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str,
        services: DeliveryServices | None = None,
    ) -> Decimal:
        self._check_quantity(quantity)
        total_amount = self.unit_price * quantity

        (services or DeliveryServices()).mail.send_ebook(self, quantity, email)

        self.logger.info(f"EBook purchase processed and sent to email: {email}")
        return total_amount

    def details(self) -> str:
        return f"FileType: {self.file_type}"


class ShowcaseBook(Item):
    label = "Showcase/Demo Book"

    kind: Literal["showcase"] = "showcase"

    def is_purchasable(self) -> bool:
        return False

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str,
        services: DeliveryServices | None = None,
    ) -> Decimal:
        # Refused before the quantity is looked at
        raise NotForSale(self.identifier)


class AudioBook(Item):
    label = "Audio Book"

    kind: Literal["audio"] = "audio"
    audio_format: str
    duration_minutes: int = Field(ge=0)

    def is_purchasable(self) -> bool:
        return True

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str,
        services: DeliveryServices | None = None,
    ) -> Decimal:
        self._check_quantity(quantity)
        total_amount = self.unit_price * quantity

        (services or DeliveryServices()).audio.send_audio_book(self, quantity, email)

        self.logger.info(f"AudioBook purchase processed and sent to email: {email}")
        return total_amount

    def details(self) -> str:
        return f"Format: {self.audio_format}, {self.duration_minutes} minutes"


BUILTIN_VARIANTS: dict[str, type[Item]] = {
    "paper": PaperBook,
    "ebook": EBook,
    "showcase": ShowcaseBook,
    "audio": AudioBook,
}
