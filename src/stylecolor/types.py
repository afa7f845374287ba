import typing

import pydantic as pc

ColorComponent: typing.TypeAlias = typing.Annotated[
    float,
    pc.Field(ge=0.0, le=255.0, strict=True, allow_inf_nan=False),
]

AlphaComponent: typing.TypeAlias = typing.Annotated[
    float,
    pc.Field(ge=0.0, le=1.0, strict=True, allow_inf_nan=False),
]

RGBAComponents: typing.TypeAlias = tuple[float, float, float, float]
