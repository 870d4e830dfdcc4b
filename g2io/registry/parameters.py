"""Typed positional parameters for configuration strings."""

import re
from enum import StrEnum

from g2io.errors import ParameterCountMismatch, ParameterParseError

ParameterValue = int | float | str

_UNSIGNED_RE = re.compile(r"\d+")
_INTEGER_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class ParameterType(StrEnum):
    """Declared type of one positional parameter."""

    POSITIVE_INTEGER = "positive integer"  # non-negative, as in graph sizes
    INTEGER = "integer"
    FLOAT = "float"
    PROBABILITY = "probability"
    STRING = "string"

    def parse(self, text: str) -> ParameterValue:
        """Parse one raw parameter.

        Parsing is strict: surrounding or inner whitespace, underscores,
        ``nan`` and ``inf`` are rejected.

        Raises:
            ParameterParseError: If ``text`` is not a valid value.
        """
        match self:
            case ParameterType.POSITIVE_INTEGER:
                if _UNSIGNED_RE.fullmatch(text) is None:
                    raise ParameterParseError(f"{text!r} is not a positive integer")
                return int(text)
            case ParameterType.INTEGER:
                if _INTEGER_RE.fullmatch(text) is None:
                    raise ParameterParseError(f"{text!r} is not an integer")
                return int(text)
            case ParameterType.FLOAT:
                if _FLOAT_RE.fullmatch(text) is None:
                    raise ParameterParseError(f"{text!r} is not a float")
                return float(text)
            case ParameterType.PROBABILITY:
                if _FLOAT_RE.fullmatch(text) is None:
                    raise ParameterParseError(f"{text!r} is not a probability")
                p = float(text)
                if not 0.0 <= p <= 1.0:
                    raise ParameterParseError(
                        f"probability must be between 0 and 1, got {text!r}"
                    )
                return p
            case ParameterType.STRING:
                if not text:
                    raise ParameterParseError("empty string parameter")
                return text
        raise AssertionError(f"unhandled parameter type {self!r}")


def parse_parameters(
    name: str, schema: tuple[ParameterType, ...], raw: tuple[str, ...]
) -> list[ParameterValue]:
    """Parse raw parameter strings against a fixed-arity schema.

    Raises:
        ParameterCountMismatch: If ``len(raw) != len(schema)``.
        ParameterParseError: If any value does not parse; the message names
            the component and the 1-based position.
    """
    if len(raw) != len(schema):
        raise ParameterCountMismatch(name, len(schema), len(raw))
    values: list[ParameterValue] = []
    for position, (kind, text) in enumerate(zip(schema, raw), start=1):
        try:
            values.append(kind.parse(text))
        except ParameterParseError as e:
            raise ParameterParseError(f"{name}: parameter {position}: {e}") from e
    return values
