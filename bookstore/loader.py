"""Seed the catalog from JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .discovery import discover_variants
from .exceptions import CatalogFileError
from .model import Item

logger = logging.getLogger(__name__)


def load_catalog(
    path: str | Path, variants: dict[str, type[Item]] | None = None
) -> list[Item]:
    """Read a JSON array of tagged item records.

    Every record needs a "kind" key naming a registered variant, e.g.

        [{"kind": "paper", "identifier": "978-0134685991",
          "title": "Effective Java", "author": "Joshua Bloch",
          "year": 2017, "unit_price": "45.99", "stock": 10}]
    """
    if variants is None:
        variants = discover_variants()

    try:
        with open(path) as f:
            records = json.load(f)
    except OSError as e:
        raise CatalogFileError(f"Could not read {path}: {e}", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise CatalogFileError(f"Malformed JSON in {path}: {e}", path=str(path)) from e

    if not isinstance(records, list):
        raise CatalogFileError(
            f"Expected a list of items in {path}", path=str(path)
        )

    items = [_build_item(record, index, variants) for index, record in enumerate(records)]
    logger.info(f"Loaded {len(items)} items from {path}")
    return items


def _build_item(
    record: Any, index: int, variants: dict[str, type[Item]]
) -> Item:
    if not isinstance(record, dict):
        raise CatalogFileError(f"Record {index} is not an object", index=index)

    kind = record.get("kind")
    variant = variants.get(kind) if isinstance(kind, str) else None
    if variant is None:
        raise CatalogFileError(
            f"Record {index} has unknown kind {kind!r}", index=index, kind=kind
        )

    try:
        return variant.model_validate(record)
    except ValidationError as e:
        raise CatalogFileError(
            f"Record {index} is invalid: {e}", index=index, kind=kind
        ) from e


def dump_catalog(items: list[Item]) -> list[dict]:
    """Render items as JSON-compatible records accepted by load_catalog()."""
    return [item.model_dump(mode="json") for item in items]
