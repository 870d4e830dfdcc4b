"""Deterministic seed derivation for reproducible parallel generation.

A run owns exactly one master ``numpy.random.Generator``. Before each
parallel phase, one child seed per task is drawn from it in task-index
order; every task then builds its own generator from its seed. Which
worker runs a task, and when, never influences what the task draws.
"""

import numpy as np

# Seeds live in [0, 2**63). The bound is a power of two, so numpy's masked
# bounded sampling never rejects: one 64-bit draw per seed.
SEED_UPPER_BOUND = 2**63


def new_master_seed() -> int:
    """Pick a fresh master seed from OS entropy.

    The caller must report it (the pipeline logs it) so the run can be
    replayed.
    """
    return int(np.random.default_rng().integers(0, SEED_UPPER_BOUND))


def master_rng(seed: int) -> np.random.Generator:
    """Build the master generator of a run."""
    if seed < 0:
        raise ValueError(f"seed must be a non-negative integer, got {seed}")
    return np.random.default_rng(seed)


def derive_seeds(master: np.random.Generator, count: int) -> np.ndarray:
    """Draw ``count`` child seeds from the master generator, in index order.

    Advances ``master`` irreversibly. Two calls on generators in the same
    state with the same ``count`` return equal arrays.

    Args:
        master: The run's master generator. Only the orchestrating thread
            may call this.
        count: Number of seeds (outer nodes or outer edges).

    Returns:
        int64 array of shape (count,).
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return master.integers(0, SEED_UPPER_BOUND, size=count, dtype=np.int64)


def task_rng(seed: int | np.integer) -> np.random.Generator:
    """Build the private generator of one parallel task."""
    return np.random.default_rng(int(seed))


def verify_seed_determinism(seed: int, count: int = 16) -> bool:
    """Check that two derivations from the same master seed agree.

    Also checks that the first child generators draw identical values.
    """
    first = derive_seeds(master_rng(seed), count)
    second = derive_seeds(master_rng(seed), count)
    if not np.array_equal(first, second):
        return False
    if count == 0:
        return True
    r1 = task_rng(first[0]).random(10)
    r2 = task_rng(second[0]).random(10)
    return bool(np.array_equal(r1, r2))
