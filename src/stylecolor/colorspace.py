"""
Native color descriptors and their resolution to RGBA components.

A :class:`NativeColor` is what a platform hands over: channel values in
some color space followed by alpha, or a pattern fill that has no flat
color at all. A :class:`ColorSpaceResolver` turns one into four RGBA
components on a [0, 1] base scale; extended-range spaces may legitimately
produce values outside that scale.

The conversions in :class:`DefaultColorSpaceResolver` use D65 white and
the sRGB transfer curve. They are not color managed.
"""

# System
import enum
import typing

# Third Party
import numpy as np
import pydantic as pc
from numpy.typing import NDArray

# Internal
from .types import RGBAComponents


class ColorModel(enum.Enum):
    """Channel layout of a color space."""

    RGB = "rgb"
    GRAY = "gray"
    CMYK = "cmyk"
    XYZ = "xyz"
    LAB = "lab"

    @property
    def channels(self) -> int:
        return _CHANNELS[self]


_CHANNELS = {
    ColorModel.RGB: 3,
    ColorModel.GRAY: 1,
    ColorModel.CMYK: 4,
    ColorModel.XYZ: 3,
    ColorModel.LAB: 3,
}


class ColorSpace(enum.Enum):
    """Color spaces a native color may be expressed in."""

    SRGB = "sRGB"
    EXTENDED_SRGB = "extendedSRGB"
    LINEAR_SRGB = "linearSRGB"
    EXTENDED_LINEAR_SRGB = "extendedLinearSRGB"
    DISPLAY_P3 = "displayP3"
    DCI_P3 = "dcip3"
    ADOBE_RGB_1998 = "adobeRGB1998"
    GENERIC_RGB_LINEAR = "genericRGBLinear"
    ACESCG_LINEAR = "acescgLinear"
    ITUR_709 = "itur_709"
    ITUR_2020 = "itur_2020"
    ROMM_RGB = "rommrgb"
    GENERIC_GRAY_GAMMA_2_2 = "genericGrayGamma2_2"
    EXTENDED_GRAY = "extendedGray"
    LINEAR_GRAY = "linearGray"
    EXTENDED_LINEAR_GRAY = "extendedLinearGray"
    GENERIC_CMYK = "genericCMYK"
    GENERIC_XYZ = "genericXYZ"
    GENERIC_LAB = "genericLab"

    @property
    def model(self) -> ColorModel:
        return _TRAITS[self].model

    @property
    def extended(self) -> bool:
        """Whether channel values outside [0, 1] are meaningful."""
        return _TRAITS[self].extended

    @property
    def linear(self) -> bool:
        """Whether channels resolve to linear light rather than sRGB-encoded values."""
        return _TRAITS[self].linear


class _SpaceTraits(typing.NamedTuple):
    model: ColorModel
    extended: bool = False
    linear: bool = False


_TRAITS = {
    ColorSpace.SRGB: _SpaceTraits(ColorModel.RGB),
    ColorSpace.EXTENDED_SRGB: _SpaceTraits(ColorModel.RGB, extended=True),
    ColorSpace.LINEAR_SRGB: _SpaceTraits(ColorModel.RGB, linear=True),
    ColorSpace.EXTENDED_LINEAR_SRGB: _SpaceTraits(
        ColorModel.RGB, extended=True, linear=True
    ),
    ColorSpace.DISPLAY_P3: _SpaceTraits(ColorModel.RGB),
    ColorSpace.DCI_P3: _SpaceTraits(ColorModel.RGB),
    ColorSpace.ADOBE_RGB_1998: _SpaceTraits(ColorModel.RGB),
    ColorSpace.GENERIC_RGB_LINEAR: _SpaceTraits(ColorModel.RGB, linear=True),
    ColorSpace.ACESCG_LINEAR: _SpaceTraits(ColorModel.RGB, linear=True),
    ColorSpace.ITUR_709: _SpaceTraits(ColorModel.RGB),
    ColorSpace.ITUR_2020: _SpaceTraits(ColorModel.RGB),
    ColorSpace.ROMM_RGB: _SpaceTraits(ColorModel.RGB),
    ColorSpace.GENERIC_GRAY_GAMMA_2_2: _SpaceTraits(ColorModel.GRAY),
    ColorSpace.EXTENDED_GRAY: _SpaceTraits(ColorModel.GRAY, extended=True),
    ColorSpace.LINEAR_GRAY: _SpaceTraits(ColorModel.GRAY, linear=True),
    ColorSpace.EXTENDED_LINEAR_GRAY: _SpaceTraits(
        ColorModel.GRAY, extended=True, linear=True
    ),
    ColorSpace.GENERIC_CMYK: _SpaceTraits(ColorModel.CMYK),
    ColorSpace.GENERIC_XYZ: _SpaceTraits(ColorModel.XYZ, linear=True),
    ColorSpace.GENERIC_LAB: _SpaceTraits(ColorModel.LAB, linear=True),
}


class NativeColor(pc.BaseModel):
    """A platform color: components in a color space, or a pattern fill."""

    model_config = pc.ConfigDict(frozen=True)

    color_space: ColorSpace = pc.Field(
        default=ColorSpace.SRGB, description="Color space of the components"
    )
    components: tuple[float, ...] = pc.Field(
        default=(), description="Channel values followed by alpha"
    )
    pattern: str | None = pc.Field(
        default=None, description="Pattern image name for pattern fills"
    )


@typing.runtime_checkable
class ColorSpaceResolver(typing.Protocol):
    """Turns a native color into RGBA components on a [0, 1] base scale."""

    def resolve(self, color: NativeColor) -> RGBAComponents | None:
        """Return (red, green, blue, alpha), or None if the color has no flat RGBA."""
        ...


# XYZ (D65) to linear sRGB
XYZ_TO_LINEAR_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)

D65_WHITE = np.array([0.95047, 1.0, 1.08883])

# CIE constants
_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Encode linear light with the sRGB transfer curve.

    The curve is mirrored for negative values so extended-range inputs keep
    their sign.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    encoded = np.where(
        magnitude <= 0.0031308,
        magnitude * 12.92,
        1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055,
    )
    return np.sign(linear) * encoded


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE Lab (L in [0, 100]) to XYZ relative to D65 white."""
    L, a, b = np.asarray(lab, dtype=np.float64)
    fy = (L + 16.0) / 116.0
    f = np.array([fy + a / 500.0, fy, fy - b / 200.0])
    cubed = f**3
    relative = np.where(cubed > _LAB_EPSILON, cubed, (116.0 * f - 16.0) / _LAB_KAPPA)
    return relative * D65_WHITE


def xyz_to_linear_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    return XYZ_TO_LINEAR_SRGB @ np.asarray(xyz, dtype=np.float64)


def cmyk_to_rgb(cmyk: NDArray[np.float64]) -> NDArray[np.float64]:
    c, m, y, k = np.asarray(cmyk, dtype=np.float64)
    return (1.0 - np.array([c, m, y])) * (1.0 - k)


class DefaultColorSpaceResolver:
    """Resolves every :class:`ColorSpace` to sRGB-oriented RGBA components.

    Standard spaces are clipped to [0, 1], as platform colors are clipped
    when created. Extended spaces are passed through unclipped.
    """

    def resolve(self, color: NativeColor) -> RGBAComponents | None:
        if color.pattern is not None:
            return None

        space = color.color_space
        channels = space.model.channels
        if len(color.components) < channels:
            return None

        values = np.asarray(color.components[:channels], dtype=np.float64)
        alpha = (
            float(color.components[channels])
            if len(color.components) > channels
            else 1.0
        )
        if not (np.all(np.isfinite(values)) and np.isfinite(alpha)):
            return None

        # Extreme inputs may overflow; such results are rejected below.
        with np.errstate(over="ignore", invalid="ignore"):
            match space.model:
                case ColorModel.RGB:
                    rgb = values
                case ColorModel.GRAY:
                    rgb = np.repeat(values, 3)
                case ColorModel.CMYK:
                    rgb = cmyk_to_rgb(values)
                case ColorModel.XYZ:
                    rgb = xyz_to_linear_srgb(values)
                case ColorModel.LAB:
                    rgb = xyz_to_linear_srgb(lab_to_xyz(values))

            if space.linear:
                rgb = linear_to_srgb(rgb)

        if not np.all(np.isfinite(rgb)):
            return None

        if not space.extended:
            rgb = np.clip(rgb, 0.0, 1.0)
            alpha = min(max(alpha, 0.0), 1.0)

        red, green, blue = (float(c) for c in rgb)
        return red, green, blue, alpha
