"""Parsing of ``name`` / ``name/p1,p2,...`` configuration strings."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ComponentSpec:
    """A component name with its raw, still untyped parameters."""

    name: str
    params: tuple[str, ...] = ()

    @classmethod
    def parse(cls, config_string: str) -> "ComponentSpec":
        """Split a configuration string into name and parameters.

        The whole string is stripped; nothing inside it is. The name ends
        at the first ``/``. An empty parameter part means no parameters.
        Commas and slashes cannot be escaped.

        Example:
            >>> ComponentSpec.parse(" ba/100,5 ")
            ComponentSpec(name='ba', params=('100', '5'))
        """
        name, _, params = config_string.strip().partition("/")
        return cls(name=name, params=tuple(params.split(",")) if params else ())

    def __str__(self) -> str:
        if not self.params:
            return self.name
        return f"{self.name}/{','.join(self.params)}"
