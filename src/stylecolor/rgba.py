"""Parsing and formatting of the ``rgba(R, G, B, A)`` text notation.

The grammar is deliberately narrow: optional leading whitespace, the
literal ``rgba(``, four comma separated numbers (each optionally padded
with whitespace), ``)`` and optional trailing whitespace. Numbers have an
optional minus sign and at most one decimal point; there is no exponent
form.
"""

# System
import decimal
import re
import typing

# Internal
from .types import RGBAComponents

PREFIX = "rgba("

_TOKEN_SPEC = [
    ("NUMBER", r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"),
    ("COMMA", r","),
    ("CLOSE", r"\)"),
    ("SPACE", r"\s+"),
    ("MISMATCH", r"."),
]
_TOKEN_RE = re.compile(
    "|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC), re.DOTALL
)

# Token kinds of a well formed argument list, whitespace excluded.
_ARGUMENT_LIST = (
    "NUMBER",
    "COMMA",
    "NUMBER",
    "COMMA",
    "NUMBER",
    "COMMA",
    "NUMBER",
    "CLOSE",
)


class Token(typing.NamedTuple):
    kind: str
    text: str
    position: int


def tokenize(text: str) -> list[Token]:
    """Split the argument list following ``rgba(`` into tokens.

    Characters that belong to no token are reported as ``MISMATCH`` tokens
    rather than raising, so callers can reject the input structurally.
    """
    return [
        Token(match.lastgroup, match.group(), match.start())
        for match in _TOKEN_RE.finditer(text)
    ]


def parse_rgba(text: str) -> RGBAComponents | None:
    """Parse ``text`` into four floats, or return None if it is malformed.

    Only the syntax is checked here; component ranges are enforced by
    :class:`stylecolor.StyleColor`.
    """
    if not isinstance(text, str):
        return None

    body = text.lstrip()
    if not body.startswith(PREFIX):
        return None

    tokens = [
        token for token in tokenize(body[len(PREFIX) :]) if token.kind != "SPACE"
    ]
    if tuple(token.kind for token in tokens) != _ARGUMENT_LIST:
        return None

    red, green, blue, alpha = (
        float(token.text) for token in tokens if token.kind == "NUMBER"
    )
    return red, green, blue, alpha


def format_component(value: float) -> str:
    """Render a component with the shortest text that reads back exactly."""
    text = repr(float(value))
    if "e" in text:
        # The grammar has no exponent form; spell the same digits out.
        text = format(decimal.Decimal(text), "f")
    return text


def format_rgba(red: float, green: float, blue: float, alpha: float) -> str:
    """Render the canonical ``rgba(R, G, B, A)`` notation."""
    components = ", ".join(format_component(c) for c in (red, green, blue, alpha))
    return f"{PREFIX}{components})"
