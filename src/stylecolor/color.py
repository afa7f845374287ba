# System
import logging

# Third Party
import pydantic as pc

# Internal
from .colorspace import (
    ColorSpace,
    ColorSpaceResolver,
    DefaultColorSpaceResolver,
    NativeColor,
)
from .expression import RGBA, Expression
from .rgba import format_rgba, parse_rgba
from .types import AlphaComponent, ColorComponent

_COMPONENT_NAMES = ("red", "green", "blue", "alpha")

# Used when a native color has no flat RGBA representation.
_FALLBACK_COMPONENTS = (0.0, 0.0, 0.0, 1.0)


class ColorDecodeError(ValueError):
    """Encoded JSON is neither an rgba string nor an rgba expression array."""


class StyleColor(pc.BaseModel):
    """An RGBA color as used by style properties.

    Red, green and blue are in [0, 255] and alpha is in [0, 1]. Instances
    are immutable and compare equal when all four components are exactly
    equal.

    Colors encode to JSON as their ``rgba(R, G, B, A)`` string and decode
    from either that string or an ``["rgba", R, G, B, A]`` expression array.
    """

    model_config = pc.ConfigDict(frozen=True)

    red: ColorComponent
    green: ColorComponent
    blue: ColorComponent
    alpha: AlphaComponent

    @pc.model_validator(mode="before")
    @classmethod
    def decode_encoded_forms(cls, data, info: pc.ValidationInfo):
        """Accept rgba strings, rgba expressions and rgba expression arrays."""
        if isinstance(data, str):
            components = parse_rgba(data)
            if components is None:
                raise ValueError(f"'{data}' is not a valid rgba(...) string")
            return dict(zip(_COMPONENT_NAMES, components))

        if isinstance(data, (list, tuple)):
            data = Expression.from_array(data)

        if isinstance(data, Expression):
            if data.operator != RGBA:
                raise ValueError(
                    f"Expected the '{RGBA}' operator, got '{data.operator}'"
                )
            if len(data.arguments) != len(_COMPONENT_NAMES):
                raise ValueError(
                    f"'{RGBA}' takes exactly 4 arguments, got {len(data.arguments)}"
                )
            return dict(zip(_COMPONENT_NAMES, data.arguments))

        if info.mode == "json":
            raise ValueError(
                "Colors must be encoded as an rgba string or an rgba expression array"
            )

        return data

    @pc.model_serializer
    def serialize(self) -> str:
        return self.rgba_string

    @classmethod
    def from_components(
        cls, red: float, green: float, blue: float, alpha: float
    ) -> "StyleColor | None":
        """Create a color from components, or return None if any is out of range."""
        try:
            return cls(red=red, green=green, blue=blue, alpha=alpha)
        except pc.ValidationError:
            return None

    @classmethod
    def from_rgba_string(cls, text: str) -> "StyleColor | None":
        """Parse ``rgba(R, G, B, A)``, or return None if malformed or out of range."""
        if not isinstance(text, str):
            return None
        try:
            return cls.model_validate(text)
        except pc.ValidationError:
            return None

    @classmethod
    def from_expression(cls, expression: Expression) -> "StyleColor | None":
        """Evaluate a literal ``rgba`` expression, or return None if it is not one."""
        if not isinstance(expression, Expression):
            return None
        try:
            return cls.model_validate(expression)
        except pc.ValidationError:
            return None

    @classmethod
    def from_native(
        cls, color: NativeColor, resolver: ColorSpaceResolver | None = None
    ) -> "StyleColor":
        """
        Convert a native color from any color space.

        This never fails. Components from extended-range spaces are scaled
        but not clamped, so the result may lie outside the usual ranges.
        Colors the resolver cannot express as RGBA (pattern fills, for
        example) become opaque black.
        """
        if resolver is None:
            resolver = DefaultColorSpaceResolver()

        components = resolver.resolve(color)
        if components is None:
            logging.debug(f"Cannot resolve {color!r} to RGBA; using opaque black.")
            return cls.model_construct(
                **dict(zip(_COMPONENT_NAMES, _FALLBACK_COMPONENTS))
            )

        red, green, blue, alpha = components
        # Extended-range values are kept as is, so skip validation.
        return cls.model_construct(
            red=float(red) * 255.0,
            green=float(green) * 255.0,
            blue=float(blue) * 255.0,
            alpha=float(alpha),
        )

    @classmethod
    def decode_json(cls, data: str | bytes) -> "StyleColor":
        """Decode a JSON document holding an rgba string or rgba expression array.

        Raises:
            ColorDecodeError: if the document has any other shape or the color
                is invalid.
        """
        try:
            return cls.model_validate_json(data)
        except pc.ValidationError as e:
            raise ColorDecodeError(f"Invalid encoded color: {e}") from e

    def encode_json(self) -> str:
        """Encode as a JSON string holding the rgba notation."""
        return self.model_dump_json()

    @property
    def rgba_string(self) -> str:
        """The canonical ``rgba(R, G, B, A)`` notation."""
        return format_rgba(self.red, self.green, self.blue, self.alpha)

    def to_expression(self) -> Expression:
        return Expression(
            operator=RGBA, arguments=(self.red, self.green, self.blue, self.alpha)
        )

    def to_native(self) -> NativeColor:
        """Express this color as an sRGB native color with [0, 1] components."""
        return NativeColor(
            color_space=ColorSpace.SRGB,
            components=(
                self.red / 255.0,
                self.green / 255.0,
                self.blue / 255.0,
                self.alpha,
            ),
        )

    def __str__(self) -> str:
        return self.rgba_string
