"""
Lookup of endpoint variants by configured name.
"""

from dewpoint.config import Variant
from dewpoint.engine.variants.base import EndpointVariant
from dewpoint.engine.variants.dewpoint_only import DewpointVariant
from dewpoint.engine.variants.mould import MouldIndexVariant

VARIANTS: dict[Variant, type[EndpointVariant]] = {
    Variant.MOULD: MouldIndexVariant,
    Variant.DEWPOINT: DewpointVariant,
}


def get_variant(variant: Variant) -> EndpointVariant:
    """Instantiate the endpoint variant for a configured name."""
    try:
        return VARIANTS[Variant(variant)]()
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported variant: {variant}")
