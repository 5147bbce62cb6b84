"""
Validation pass that runs before any mutation.

Two kinds of problems are detected here:

- Rotation: a variant whose rotation is not (close to) zero. This is checked
  across every variant set in scope and blocks the whole run.
- Per-set problems: no variants, no attributes, unreadable attributes,
  missing axis attributes, duplicate keys. These raise a ``VariantSetError``
  subclass so the caller can skip the set and continue with the next one.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from .config import DEFAULT_ROTATION_EPSILON, AttributeNames
from .keys import build_key
from .models import Variant, VariantInfo
from .nodes import SceneNode

ROTATION_EPSILON = DEFAULT_ROTATION_EPSILON


class VariantSetError(Exception):
    """A variant set cannot be laid out. Other sets are unaffected."""

    def __init__(self, set_name: str, message: str):
        super().__init__(f"{set_name}: {message}" if set_name else message)
        self.set_name = set_name
        self.message = message


class NoVariantsError(VariantSetError):
    def __init__(self, set_name: str):
        super().__init__(
            set_name,
            "No variants found in the variant set. Please check its structure.",
        )


class NoAttributesError(VariantSetError):
    def __init__(self, set_name: str):
        super().__init__(
            set_name,
            "No variant attributes detected in the variant set. "
            "Please verify its structure.",
        )


class AttributeReadError(VariantSetError):
    def __init__(self, set_name: str, variant_name: str):
        super().__init__(
            set_name,
            f"Failed to read attributes of variant '{variant_name}'. "
            "It may be broken or contain conflicting values.",
        )
        self.variant_name = variant_name


class MissingAttributesError(VariantSetError):
    def __init__(self, set_name: str, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(
            set_name,
            "Missing required attributes: " + ", ".join(self.missing) + ".",
        )


class DuplicateVariantError(VariantSetError):
    def __init__(self, set_name: str, key: str):
        super().__init__(
            set_name,
            f"Some variants have duplicate attribute values: {key}. "
            "Please ensure each variant has unique attribute values.",
        )
        self.key = key


@dataclass
class RotationIssue:
    """Variants of one variant set whose rotation is not zero."""

    set_name: str
    variant_names: List[str] = field(default_factory=list)


def normalize_rotation(degrees: float) -> float:
    """Map ``degrees`` into [0, 360)."""
    normalized = degrees % 360.0
    # -1e-18 % 360 rounds to 360.0
    return 0.0 if normalized >= 360.0 else normalized


def is_rotated(degrees: float, epsilon: float = ROTATION_EPSILON) -> bool:
    """True when ``degrees`` is more than ``epsilon`` away from zero on the circle."""
    normalized = normalize_rotation(degrees)
    return min(normalized, 360.0 - normalized) > epsilon


def check_rotation(
    variants: Iterable[Union[Variant, SceneNode]], epsilon: float = ROTATION_EPSILON
) -> List[str]:
    """Return the names of non-conforming variants, in input order."""
    return [v.name for v in variants if is_rotated(v.rotation, epsilon)]


def find_duplicate_key(info: VariantInfo) -> Optional[str]:
    """
    Return the first canonical key shared by two variants, or None.

    Variants are visited in their stored order and keyed on the full
    ``property_keys`` list.
    """
    seen = set()
    for variant in info.variants:
        key = build_key(variant.attributes, info.property_keys)
        if key in seen:
            return key
        seen.add(key)
    return None


def check_duplicates(info: VariantInfo) -> None:
    """Raise ``DuplicateVariantError`` if two variants share a key."""
    key = find_duplicate_key(info)
    if key is not None:
        raise DuplicateVariantError(info.set_name, key)


def missing_required_attributes(
    info: VariantInfo, names: AttributeNames
) -> List[str]:
    """Required axis attribute names absent from the whole variant set."""
    return [name for name in names.required if name not in info.property_values]


def check_required_attributes(info: VariantInfo, names: AttributeNames) -> None:
    """Raise ``MissingAttributesError`` if style, color or size is absent."""
    missing = missing_required_attributes(info, names)
    if missing:
        raise MissingAttributesError(info.set_name, missing)


def validate_variant_info(info: VariantInfo, names: AttributeNames) -> None:
    """Run every per-set check in order: attributes first, then duplicates."""
    check_required_attributes(info, names)
    check_duplicates(info)
