"""Default configuration: single source of truth for CLI defaults."""

from g2io.config.experiment import GenerationConfig

# Three chains of three nodes linked first-to-first along an outer chain.
DEFAULT_CONFIG = GenerationConfig(outer="chain/3", inner="chain/3", linker="first")
