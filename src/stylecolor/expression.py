# System
import typing

# Third Party
import pydantic as pc

# Operator tag of the color constructor expression.
RGBA = "rgba"

Argument: typing.TypeAlias = typing.Union[bool, float, str, None, "Expression"]


class Expression(pc.BaseModel):
    """A style expression node: an operator tag and its ordered arguments."""

    model_config = pc.ConfigDict(frozen=True)

    operator: str = pc.Field(description="Operator tag, e.g. 'rgba'")
    arguments: tuple[Argument, ...] = pc.Field(
        default=(), description="Ordered operator arguments"
    )

    @pc.field_validator("arguments", mode="before")
    @classmethod
    def validate_nested_arrays(cls, v):
        """Turn nested JSON arrays into sub-expressions."""
        if not isinstance(v, (list, tuple)):
            return v
        return tuple(
            cls.from_array(item) if isinstance(item, (list, tuple)) else item
            for item in v
        )

    @classmethod
    def from_array(cls, value: list | tuple) -> "Expression":
        """Build an expression from its JSON array form ``[operator, *arguments]``."""
        if (
            not isinstance(value, (list, tuple))
            or not value
            or not isinstance(value[0], str)
        ):
            raise ValueError("Expression arrays must start with an operator string")

        operator, *arguments = value
        return cls(operator=operator, arguments=arguments)

    def to_array(self) -> list:
        """Render the JSON array form of this expression."""
        return [
            self.operator,
            *(
                argument.to_array() if isinstance(argument, Expression) else argument
                for argument in self.arguments
            ),
        ]


Expression.model_rebuild()
