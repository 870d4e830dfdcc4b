"""Named, parameterized component registry.

Maps a textual name to a factory and its fixed-arity parameter schema, and
turns configuration strings into ready-to-use instances. Built-in catalogs
register their entries once at import time; entries are immutable after
that.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from g2io.errors import DuplicateName, UnknownComponent
from g2io.graph.orientation import OrientationRule
from g2io.graph.types import Orientation
from g2io.registry.parameters import ParameterType, parse_parameters
from g2io.registry.spec import ComponentSpec

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """One registered component.

    ``native_orientation`` is None when the factory builds both
    orientations itself; otherwise output is converted by the registry's
    bind hook when the other orientation is requested.
    """

    name: str
    schema: tuple[ParameterType, ...]
    factory: Callable[..., Any]
    description: tuple[str, ...]
    native_orientation: Orientation | None = None
    orientation_rule: OrientationRule = OrientationRule.RANDOM

    @property
    def summary(self) -> str:
        return self.description[0] if self.description else ""


BindHook = Callable[[Any, RegistryEntry, Orientation | None], Any]


class Registry:
    """Registry of one kind of component (generator, linker, renderer).

    Args:
        kind: Human-readable component kind, used in error messages.
        bind: Optional hook applied to every resolved instance, given the
            entry and the requested orientation.
    """

    def __init__(self, kind: str, bind: BindHook | None = None) -> None:
        self.kind = kind
        self._bind = bind
        self._entries: dict[str, RegistryEntry] = {}

    def register(
        self,
        name: str,
        schema: Sequence[ParameterType],
        factory: Callable[..., Any],
        description: str | Sequence[str],
        native_orientation: Orientation | None = None,
        orientation_rule: OrientationRule = OrientationRule.RANDOM,
    ) -> RegistryEntry:
        """Register a factory under ``name``.

        Raises:
            DuplicateName: If ``name`` is already registered (exact,
                case-sensitive match).
        """
        if not name or name != name.strip() or "/" in name:
            raise ValueError(f"invalid {self.kind} name {name!r}")
        if name in self._entries:
            raise DuplicateName(self.kind, name)
        if isinstance(description, str):
            description = (description,)
        entry = RegistryEntry(
            name=name,
            schema=tuple(schema),
            factory=factory,
            description=tuple(description),
            native_orientation=native_orientation,
            orientation_rule=orientation_rule,
        )
        self._entries[name] = entry
        log.debug("Registered %s %r (%d parameters)", self.kind, name, len(entry.schema))
        return entry

    def plugin(
        self,
        name: str,
        schema: Sequence[ParameterType],
        description: str | Sequence[str],
        native_orientation: Orientation | None = None,
        orientation_rule: OrientationRule = OrientationRule.RANDOM,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of :meth:`register`; returns the factory unchanged."""

        def decorator(factory: Callable[..., Any]) -> Callable[..., Any]:
            self.register(
                name, schema, factory, description, native_orientation, orientation_rule
            )
            return factory

        return decorator

    def get(self, name: str) -> RegistryEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownComponent(self.kind, name, sorted(self._entries)) from None

    def resolve(self, config_string: str, orientation: Orientation | None = None) -> Any:
        """Build an instance from a ``name`` or ``name/p1,...,pk`` string.

        Raises:
            UnknownComponent: If the name is not registered.
            ParameterCountMismatch: If the parameter count differs from the
                schema.
            ParameterParseError: If a parameter does not parse as its type.
            InvalidParameters: If the factory rejects the parsed values.
        """
        spec = ComponentSpec.parse(config_string)
        entry = self.get(spec.name)
        values = parse_parameters(spec.name, entry.schema, spec.params)
        instance = entry.factory(*values)
        if self._bind is not None:
            instance = self._bind(instance, entry, orientation)
        log.debug("Resolved %s %s", self.kind, spec)
        return instance

    def list(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Lazily yield ``(name, description)`` pairs sorted by name."""
        for name in sorted(self._entries):
            yield name, self._entries[name].description

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
