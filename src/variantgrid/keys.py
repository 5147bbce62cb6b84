"""Canonical variant keys."""

from typing import Mapping, Sequence

KEY_SEPARATOR = "|"


def build_key(attributes: Mapping[str, str], ordered_keys: Sequence[str]) -> str:
    """
    Build the canonical key of a variant.

    Values are taken in ``ordered_keys`` order and joined with
    ``KEY_SEPARATOR``. A missing attribute contributes an empty field, so two
    variants that omit the same attribute and agree on the rest share a key.

    Args:
        attributes: Attribute name to value.
        ordered_keys: Attribute names in key order.

    Returns:
        The joined key string.
    """
    return KEY_SEPARATOR.join(attributes.get(key, "") for key in ordered_keys)
