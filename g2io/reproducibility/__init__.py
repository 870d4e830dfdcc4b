"""Reproducibility infrastructure: master and per-task seed management."""

from g2io.reproducibility.seed import (
    SEED_UPPER_BOUND,
    derive_seeds,
    master_rng,
    new_master_seed,
    task_rng,
    verify_seed_determinism,
)

__all__ = [
    "SEED_UPPER_BOUND",
    "derive_seeds",
    "master_rng",
    "new_master_seed",
    "task_rng",
    "verify_seed_determinism",
]
