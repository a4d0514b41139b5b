#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Selection rules for Schrödinger (n, l, m) transitions

A transition (n, l, m) → (n', l', m') is accepted when

* n' ≠ n and 1 ≤ n' ≤ 6,
* 0 ≤ l' ≤ n' − 1 and −l' ≤ m' ≤ l',
* |l − l'| = 1,
* |m − m'| ≤ 1.

For a given target n' every (l', m') pair satisfying the rules is equally
likely.  The choice of n' itself, for spontaneous emission, is weighted
by the transition strengths in
:data:`~pyhydrogen.physics.transitions.TRANSITION_STRENGTHS`.
"""

from __future__ import annotations

import logging

import numpy as np

from pyhydrogen.exceptions import InvariantError
from pyhydrogen.models.records import QuantumNumbers
from pyhydrogen.physics.sampling import choose_uniform, choose_weighted_value
from pyhydrogen.physics.transitions import TransitionTable, get_transition_table
from pyhydrogen.utils.constants import GROUND_STATE, MAX_STATE, METASTABLE_STATE
from pyhydrogen.utils.validation import validate_transition

logger = logging.getLogger(__name__)


def is_metastable(nlm: QuantumNumbers) -> bool:
    """``True`` for (2, 0, 0), which has no allowed spontaneous decay."""
    return nlm.as_tuple() == METASTABLE_STATE


def is_valid_transition(old: QuantumNumbers, new: QuantumNumbers) -> bool:
    """Boolean form of :func:`~pyhydrogen.utils.validation.validate_transition`."""
    try:
        validate_transition(old.as_tuple(), new.as_tuple())
    except InvariantError:
        return False
    return True


def successors(nlm: QuantumNumbers, n_target: int) -> list[QuantumNumbers]:
    """All states with principal number *n_target* reachable from *nlm*

    Parameters
    ----------
    nlm : QuantumNumbers
        Current state.
    n_target : int
        Principal quantum number of the target level.

    Returns
    -------
    list[QuantumNumbers]
        Reachable states ordered by (l', m'); empty when none exist.
    """
    if not GROUND_STATE <= n_target <= MAX_STATE:
        return []
    candidates = (
        QuantumNumbers(n_target, l2, m2)
        for l2 in range(n_target)
        for m2 in range(-l2, l2 + 1)
    )
    return [state for state in candidates if is_valid_transition(nlm, state)]


def choose_successor(
    rng: np.random.Generator,
    nlm: QuantumNumbers,
    n_target: int,
) -> QuantumNumbers | None:
    """Uniformly choose one of :func:`successors`, or ``None`` if there are none."""
    states = successors(nlm, n_target)
    if not states:
        return None
    return choose_uniform(rng, states)


def lower_n_candidates(n: int, l: int) -> range:
    """Lower levels that can be reached from (n, l) with |l − l'| = 1

    Reaching n' requires some l' = l ± 1 with l' ≤ n' − 1, so n' ≥ l;
    from l = 0 the only option is l' = 1, hence n' ≥ 2.
    """
    if n <= GROUND_STATE:
        return range(0)
    n_min = max(l, GROUND_STATE) if l > 0 else 2
    return range(n_min, n)


def choose_lower_n(
    rng: np.random.Generator,
    n: int,
    l: int,
    table: TransitionTable | None = None,
) -> int | None:
    """Choose the level a Schrödinger electron decays to

    Parameters
    ----------
    rng : numpy.random.Generator
        Random source.
    n, l : int
        Current principal and orbital quantum numbers.
    table : TransitionTable, optional
        Source of transition strengths; the shared table by default.

    Returns
    -------
    int or None
        The chosen lower level, weighted by transition strength, or
        ``None`` when no decay is possible (ground state, (2, 0, m), or
        every candidate has zero strength).

    Examples
    --------
    >>> rng = np.random.default_rng(0)
    >>> choose_lower_n(rng, 2, 1)
    1
    >>> choose_lower_n(rng, 2, 0) is None
    True
    """
    table = table or get_transition_table()
    candidates = list(lower_n_candidates(n, l))
    if not candidates:
        return None
    weights = [table.transition_strength(n, n2) for n2 in candidates]
    return choose_weighted_value(rng, candidates, weights)


def stimulated_emission_allowed(nlm: QuantumNumbers, n_target: int) -> bool:
    """Whether a photon can stimulate decay from *nlm* to level *n_target*

    The target must be strictly lower and must offer at least one (l', m')
    obeying the selection rules; in particular n' = 1 is reachable only
    from l = 1.
    """
    return n_target < nlm.n and bool(successors(nlm, n_target))
