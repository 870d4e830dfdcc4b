"""Error kinds raised while building components, graphs and pipelines.

Every error is raised synchronously where it is detected and propagates
unchanged out of the pipeline. Generation is deterministic, so none of
them is retried.
"""


class G2ioError(Exception):
    """Base class for all g2io errors."""


class UnknownComponent(G2ioError):
    """Raised when a configuration string names an unregistered component."""

    def __init__(self, kind: str, name: str, available: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.available = available
        super().__init__(
            f"unknown {kind} {name!r}; registered: {', '.join(available) or '(none)'}"
        )


class DuplicateName(G2ioError):
    """Raised when registering a name that is already present."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} {name!r} is already registered")


class ParameterCountMismatch(G2ioError):
    """Raised when a component receives the wrong number of parameters."""

    def __init__(self, name: str, expected: int, got: int) -> None:
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(f"{name}: expected {expected} parameter(s), got {got}")


class ParameterParseError(G2ioError):
    """Raised when a parameter cannot be parsed as its declared type."""


class InvalidParameters(G2ioError):
    """Raised by a factory when parsed parameters break its constraints."""


class InvalidNode(G2ioError):
    """Raised when an edge references a node id outside the graph."""


class CapacityOverflow(G2ioError):
    """Raised when a merge would exceed the target graph's node count."""


class GeneratorSizeMismatch(G2ioError):
    """Raised when a produced graph disagrees with its declared size."""


class OrientationMismatch(G2ioError):
    """Raised when combining graphs of different orientations."""
