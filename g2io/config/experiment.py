"""Generation configuration dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

from g2io.graph.types import Orientation


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """One inner/outer generation run.

    Component strings follow the ``name`` / ``name/p1,...,pk`` grammar and
    are stored stripped. Field validation runs in __post_init__ to reject
    invalid configurations early; component names and parameters are only
    checked when the components are resolved.
    """

    outer: str  # outer graph generator
    inner: str  # community graph generator
    linker: str  # cross-community linker
    orientation: Orientation = Orientation.DIRECTED
    seed: int | None = None  # master seed; None draws a fresh one
    n_workers: int | None = None  # worker threads; None lets the pool decide
    output_format: str = "dot"  # renderer name

    def __post_init__(self) -> None:
        """Normalize and validate fields (uses object.__setattr__ since frozen)."""
        for name in ("outer", "inner", "linker", "output_format"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
            object.__setattr__(self, name, value.strip())
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be a non-negative integer, got {self.seed}")
        if self.n_workers is not None and self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")
