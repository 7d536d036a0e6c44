"""
Delivery collaborators invoked after a successful purchase.

The default implementations only log what they would do. Real fulfilment
(shipping, e-mail transport, audio delivery) is outside this package;
plug a replacement into DeliveryServices to route purchases elsewhere.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .protocol import AudioService, MailService, ShippingService

if TYPE_CHECKING:
    from .model import AudioBook, EBook, PaperBook

logger = logging.getLogger(__name__)


class LoggingShippingService:
    """Ships paper books by logging the shipment."""

    def ship(self, book: PaperBook, quantity: int, address: str) -> None:
        logger.info(
            f"Shipping {quantity} copies of '{book.title}' to address: {address}"
        )


class LoggingMailService:
    """Mails e-books by logging the delivery."""

    def send_ebook(self, book: EBook, quantity: int, email: str) -> None:
        logger.info(
            f"Sending {quantity} copies of EBook '{book.title}' "
            f"({book.file_type}) to email: {email}"
        )


class LoggingAudioService:
    """Sends audio books by logging the delivery."""

    def send_audio_book(self, book: AudioBook, quantity: int, email: str) -> None:
        logger.info(
            f"Sending {quantity} copies of AudioBook '{book.title}' "
            f"({book.audio_format}, {book.duration_minutes} minutes) to email: {email}"
        )


class DeliveryServices:
    """Collaborators handed to Item.purchase()."""

    shipping: ShippingService
    mail: MailService
    audio: AudioService

    def __init__(
        self,
        shipping: ShippingService | None = None,
        mail: MailService | None = None,
        audio: AudioService | None = None,
    ):
        self.shipping = shipping or LoggingShippingService()
        self.mail = mail or LoggingMailService()
        self.audio = audio or LoggingAudioService()


# Verify protocol compliance at import time.
if not isinstance(LoggingShippingService(), ShippingService):
    raise TypeError("LoggingShippingService does not implement ShippingService")
if not isinstance(LoggingMailService(), MailService):
    raise TypeError("LoggingMailService does not implement MailService")
if not isinstance(LoggingAudioService(), AudioService):
    raise TypeError("LoggingAudioService does not implement AudioService")
