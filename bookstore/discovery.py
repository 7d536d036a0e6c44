"""Item variant discovery using entry points."""

import logging
from importlib.metadata import entry_points

from .model import BUILTIN_VARIANTS, Item

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "bookstore.variants"


def variant_kind(variant: type[Item]) -> str:
    """Return the kind tag declared by a variant class."""
    return variant.model_fields["kind"].default


def discover_variants() -> dict[str, type[Item]]:
    """
    Discover all available item variants.

    Returns a dictionary mapping kind tags to variant classes. Built-in
    variants are always present; entry points that fail to load or do not
    subclass Item are skipped with a warning.
    """
    variants = dict(BUILTIN_VARIANTS)

    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            variant = ep.load()
        except Exception as e:
            logger.warning(f"Could not load variant {ep.name} ({ep.value}): {e}")
            continue

        if not (isinstance(variant, type) and issubclass(variant, Item)):
            logger.warning(f"Variant {ep.name} is not an Item subclass")
            continue

        kind = variant_kind(variant)
        if not isinstance(kind, str):
            logger.warning(f"Variant {ep.name} does not declare a kind tag")
            continue

        variants[kind] = variant

    return variants


def get_available_variant_names() -> list[str]:
    """Get the sorted list of registered kind tags."""
    return sorted(discover_variants())
