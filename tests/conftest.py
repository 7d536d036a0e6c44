"""Shared fixtures for bookstore tests."""

from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest

from bookstore.model import AudioBook, EBook, PaperBook, ShowcaseBook
from bookstore.services import DeliveryServices
from bookstore.store import Bookstore


@pytest.fixture
def paper_book():
    return PaperBook(
        identifier="978-0134685991",
        title="Effective Java",
        author="Joshua Bloch",
        year=2017,
        unit_price=Decimal("10.00"),
        stock=5,
    )


@pytest.fixture
def ebook():
    return EBook(
        identifier="978-0321356680",
        title="Effective Java Digital",
        author="Joshua Bloch",
        year=2017,
        unit_price=Decimal("35.99"),
        file_type="PDF",
    )


@pytest.fixture
def showcase_book():
    return ShowcaseBook(
        identifier="978-0134494166",
        title="Clean Code Demo",
        author="Robert Martin",
        year=2008,
        unit_price=Decimal("0.00"),
    )


@pytest.fixture
def audio_book():
    return AudioBook(
        identifier="978-1234567890",
        title="The Art of Programming",
        author="Donald Knuth",
        year=2020,
        unit_price=Decimal("29.99"),
        audio_format="MP3",
        duration_minutes=480,
    )


@pytest.fixture
def services():
    """Delivery services backed by mocks."""
    return DeliveryServices(shipping=Mock(), mail=Mock(), audio=Mock())


@pytest.fixture
def today():
    return date(2025, 6, 1)


@pytest.fixture
def store(services, today):
    return Bookstore(services=services, clock=lambda: today)
