"""Base generator class for all generators."""

from __future__ import annotations

import random
from abc import ABC


class BaseGenerator(ABC):
    """Base class for all generators.

    Each generator owns its own ``random.Random`` so a seed makes it
    reproducible without touching the module-level random state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    rng : random.Random | None
        Shared random source. Takes precedence over ``seed``.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.seed = seed
        self.random = rng or random.Random(seed)
