#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Random choice helpers

Every stochastic decision in the simulation goes through a caller-owned
:class:`numpy.random.Generator`, so a seeded generator reproduces a run
exactly.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def choose_weighted_value(
    rng: np.random.Generator,
    values: Sequence[T],
    weights: Sequence[float],
) -> T | None:
    """Pick one of *values* with probability proportional to *weights*

    Parameters
    ----------
    rng : numpy.random.Generator
        Random source.
    values : Sequence
        Candidates.
    weights : Sequence[float]
        Non-negative weights aligned with *values*.

    Returns
    -------
    T or None
        The chosen value, or ``None`` when there are no candidates or all
        weights are zero.

    Notes
    -----
    The weights are normalised and accumulated; the first entry whose
    cumulative weight reaches a uniform draw is returned, so zero-weight
    entries are never chosen.
    """
    if len(values) != len(weights):
        raise ValueError(
            f"values and weights differ in length ({len(values)} vs {len(weights)})"
        )
    w = np.asarray(weights, dtype="f8")
    if w.size == 0:
        return None
    if np.any(w < 0):
        raise ValueError("weights must be non-negative")
    total = float(w.sum())
    if total == 0.0:
        return None
    cumulative = np.cumsum(w / total)
    draw = rng.random()
    for value, weight, c in zip(values, w, cumulative):
        if weight > 0 and draw <= c:
            return value
    # rounding left the last cumulative weight just below the draw
    return next(v for v, weight in zip(reversed(values), w[::-1]) if weight > 0)


def choose_uniform(rng: np.random.Generator, values: Sequence[T]) -> T:
    """Pick one of *values* uniformly; *values* must not be empty."""
    if not values:
        raise ValueError("cannot choose from an empty sequence")
    return values[int(rng.integers(len(values)))]


def random_angle(rng: np.random.Generator) -> float:
    """Uniform angle in [0, 2π)."""
    return float(rng.uniform(0.0, 2.0 * math.pi))
