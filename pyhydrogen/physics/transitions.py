#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Hydrogen transition table: which wavelengths connect which levels

The table is built once from the energy-level formula for every pair
1 ≤ n₁ < n₂ ≤ 6 and never mutated afterwards.  Wavelengths are rounded
to whole nanometres, which keeps all fifteen lines distinct::

    n₁ = 1 (Lyman)     122 103  97  95  94
    n₁ = 2 (Balmer)    656 486 434 410
    n₁ = 3 (Paschen)  1876 1282 1094
    n₁ = 4 (Brackett) 4052 2626
    n₁ = 5 (Pfund)    7460

Relative transition strengths (spontaneous-emission weights) are
tabulated per upper state; they weight the choice of the lower state when
an electron can decay to more than one level.

Use :func:`get_transition_table` to obtain the shared instance.
"""

from __future__ import annotations

import functools
import logging
import math

from pyhydrogen.exceptions import InvariantError
from pyhydrogen.models.records import StateTransition
from pyhydrogen.physics.orbits import transition_wavelength
from pyhydrogen.utils.constants import (
    GROUND_STATE,
    MAX_STATE,
    MAX_VISIBLE_WAVELENGTH,
    MIN_VISIBLE_WAVELENGTH,
)
from pyhydrogen.utils.validation import validate_n

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Transition strengths
# ---------------------------------------------------------------------------

TRANSITION_STRENGTHS: tuple[tuple[float, ...], ...] = (
    (0.0, 0.0, 0.0, 0.0, 0.0),
    (12.53, 0.0, 0.0, 0.0, 0.0),
    (3.34, 0.87, 0.0, 0.0, 0.0),
    (1.36, 0.24, 0.07, 0.0, 0.0),
    (0.69, 0.11, 0.0, 0.04, 0.0),
    (0.39, 0.06, 0.02, 0.0, 0.0),
)
"""``TRANSITION_STRENGTHS[n - 1][n' - 1]`` is the strength of n → n' (n' < n)."""


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class TransitionTable:
    """Immutable map between spectral lines and level pairs

    Examples
    --------
    >>> table = get_transition_table()
    >>> table.transition_for(656)
    StateTransition(lower=2, upper=3, wavelength=656)
    >>> table.absorption_wavelengths(1)
    (122, 103, 97, 95, 94)

    Raises
    ------
    InvariantError
        On construction, if two level pairs round to the same wavelength.
    """

    def __init__(self) -> None:
        by_wavelength: dict[int, StateTransition] = {}
        by_pair: dict[tuple[int, int], StateTransition] = {}

        for lower in range(GROUND_STATE, MAX_STATE):
            for upper in range(lower + 1, MAX_STATE + 1):
                w = _round_half_up(transition_wavelength(lower, upper))
                transition = StateTransition(lower, upper, w)
                if w in by_wavelength:
                    raise InvariantError(
                        f"Lines {by_wavelength[w]} and {transition} share {w} nm"
                    )
                by_wavelength[w] = transition
                by_pair[(lower, upper)] = transition

        self._by_wavelength = by_wavelength
        self._by_pair = by_pair
        logger.debug("Built transition table with %d lines", len(by_wavelength))

    # -- lookups ------------------------------------------------------------

    def transition_for(self, wavelength: float) -> StateTransition | None:
        """The transition with exactly this wavelength, or ``None``."""
        if wavelength != int(wavelength):
            return None
        return self._by_wavelength.get(int(wavelength))

    def all_wavelengths(self) -> tuple[int, ...]:
        """Every known line, sorted ascending."""
        return tuple(sorted(self._by_wavelength))

    def transitions(self) -> tuple[StateTransition, ...]:
        """Every line, ordered by (lower, upper)."""
        return tuple(self._by_pair[k] for k in sorted(self._by_pair))

    def absorption_wavelengths(self, n: int) -> tuple[int, ...]:
        """Wavelengths that excite level *n*, ordered by target level."""
        validate_n(n)
        return tuple(
            self._by_pair[(n, upper)].wavelength
            for upper in range(n + 1, MAX_STATE + 1)
        )

    def emission_wavelengths(self, n: int) -> tuple[int, ...]:
        """Wavelengths emitted when level *n* decays, ordered by target level."""
        validate_n(n)
        return tuple(
            self._by_pair[(lower, n)].wavelength
            for lower in range(GROUND_STATE, n)
        )

    def visible_wavelengths(self) -> tuple[int, ...]:
        return tuple(
            w for w in self.all_wavelengths()
            if MIN_VISIBLE_WAVELENGTH <= w <= MAX_VISIBLE_WAVELENGTH
        )

    def uv_wavelengths(self) -> tuple[int, ...]:
        return tuple(w for w in self.all_wavelengths() if w < MIN_VISIBLE_WAVELENGTH)

    def ir_wavelengths(self) -> tuple[int, ...]:
        return tuple(w for w in self.all_wavelengths() if w > MAX_VISIBLE_WAVELENGTH)

    def absorption_wavelength(self, n1: int, n2: int) -> int:
        """Wavelength absorbed going up from *n1* to *n2*

        Raises
        ------
        InvariantError
            If ``n1 >= n2`` or either state is out of range.
        """
        validate_n(n1)
        validate_n(n2)
        if n1 >= n2:
            raise InvariantError(f"Absorption requires n1 < n2, got {n1} -> {n2}")
        return self._by_pair[(n1, n2)].wavelength

    def emission_wavelength(self, n1: int, n2: int) -> int:
        """Wavelength emitted going down from *n1* to *n2*

        Raises
        ------
        InvariantError
            If ``n1 <= n2`` or either state is out of range.
        """
        validate_n(n1)
        validate_n(n2)
        if n1 <= n2:
            raise InvariantError(f"Emission requires n1 > n2, got {n1} -> {n2}")
        return self._by_pair[(n2, n1)].wavelength

    def higher_state_for(self, n: int, wavelength: float) -> int | None:
        """State reached by absorbing *wavelength* in state *n*, if any."""
        transition = self.transition_for(wavelength)
        if transition is not None and transition.lower == n:
            return transition.upper
        return None

    def lower_state_for(self, n: int, wavelength: float) -> int | None:
        """State reached by emitting *wavelength* from state *n*, if any."""
        transition = self.transition_for(wavelength)
        if transition is not None and transition.upper == n:
            return transition.lower
        return None

    # -- strengths ----------------------------------------------------------

    def transition_strength(self, n_upper: int, n_lower: int) -> float:
        """Relative strength of the decay *n_upper* → *n_lower*."""
        validate_n(n_upper)
        validate_n(n_lower)
        if n_lower >= n_upper:
            raise InvariantError(
                f"Strengths are defined for downward pairs, got {n_upper} -> {n_lower}"
            )
        return TRANSITION_STRENGTHS[n_upper - 1][n_lower - 1]

    def absorption_strengths(self, n: int) -> dict[int, float]:
        """Map each wavelength that excites level *n* to its strength."""
        return {
            self._by_pair[(n, upper)].wavelength: self.transition_strength(upper, n)
            for upper in range(n + 1, MAX_STATE + 1)
        }

    def __len__(self) -> int:
        return len(self._by_wavelength)

    def __contains__(self, wavelength: object) -> bool:
        return wavelength in self._by_wavelength


@functools.lru_cache(maxsize=None)
def get_transition_table() -> TransitionTable:
    """Return the process-wide :class:`TransitionTable`."""
    return TransitionTable()
