"""Range predicates for individual color components."""

import pydantic as pc

from .types import AlphaComponent, ColorComponent

_ColorComponentAdapter = pc.TypeAdapter(ColorComponent)
_AlphaComponentAdapter = pc.TypeAdapter(AlphaComponent)


def _is_valid(adapter: pc.TypeAdapter, value) -> bool:
    try:
        adapter.validate_python(value)
    except pc.ValidationError:
        return False
    return True


def valid_red(value) -> bool:
    """Whether ``value`` is a red component in [0, 255]."""
    return _is_valid(_ColorComponentAdapter, value)


def valid_green(value) -> bool:
    """Whether ``value`` is a green component in [0, 255]."""
    return _is_valid(_ColorComponentAdapter, value)


def valid_blue(value) -> bool:
    """Whether ``value`` is a blue component in [0, 255]."""
    return _is_valid(_ColorComponentAdapter, value)


def valid_alpha(value) -> bool:
    """Whether ``value`` is an alpha component in [0, 1]."""
    return _is_valid(_AlphaComponentAdapter, value)
