"""Plugin registry: configuration-string parsing and named factories."""

from g2io.registry.parameters import ParameterType, ParameterValue, parse_parameters
from g2io.registry.registry import Registry, RegistryEntry
from g2io.registry.spec import ComponentSpec

__all__ = [
    "ComponentSpec",
    "ParameterType",
    "ParameterValue",
    "Registry",
    "RegistryEntry",
    "parse_parameters",
]
