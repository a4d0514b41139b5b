#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Invariant checks for quantum states, amplitudes and wavelengths

Every validation function raises :class:`~pyhydrogen.exceptions.InvariantError`
when a physical constraint is violated.  The atomic models call these
functions whenever they mutate electron state, so an illegal state halts
the simulation immediately instead of propagating inconsistent physics.

Checked Constraints
-------------------
* Principal quantum number 1 ≤ n ≤ 6.
* Orbital quantum numbers 0 ≤ l ≤ n − 1 and −l ≤ m ≤ l.
* Schrödinger transitions obey |l − l'| = 1 and |m − m'| ≤ 1.
* Standing-wave amplitudes lie in [−1, 1].
* Wavelengths are positive.

Design Note
-----------
Validation functions accept plain integers and floats, **not** model
instances, so that ``utils`` never imports from the layers above it::

    utils ← models ← physics ← atoms ← engine
"""

from __future__ import annotations

import logging

from pyhydrogen.exceptions import InvariantError
from pyhydrogen.utils.constants import GROUND_STATE, MAX_STATE

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

AMPLITUDE_TOLERANCE: float = 1e-12
"""Slack allowed on the [−1, 1] amplitude bound for rounding error."""


# ---------------------------------------------------------------------------
# Validation functions
# ---------------------------------------------------------------------------

def validate_n(n: int) -> None:
    """Verify that *n* is a modelled principal quantum number

    Parameters
    ----------
    n : int
        Principal quantum number.

    Raises
    ------
    InvariantError
        If *n* is not an integer in [1, 6].

    Examples
    --------
    >>> validate_n(3)
    >>> validate_n(7)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyhydrogen.exceptions.InvariantError: ...
    """
    if isinstance(n, bool) or int(n) != n or not GROUND_STATE <= n <= MAX_STATE:
        raise InvariantError(
            f"Principal quantum number n={n!r} outside [{GROUND_STATE}, {MAX_STATE}]"
        )


def validate_nlm(n: int, l: int, m: int) -> None:
    """Verify that (n, l, m) is a legal hydrogen state

    Parameters
    ----------
    n : int
        Principal quantum number, 1 ≤ n ≤ 6.
    l : int
        Orbital quantum number, 0 ≤ l ≤ n − 1.
    m : int
        Magnetic quantum number, −l ≤ m ≤ l.

    Raises
    ------
    InvariantError
        If any bound is violated.
    """
    validate_n(n)
    if not 0 <= l <= n - 1:
        raise InvariantError(f"l={l} outside [0, {n - 1}] for n={n}")
    if not -l <= m <= l:
        raise InvariantError(f"m={m} outside [{-l}, {l}] for l={l}")


def validate_transition(
    old: tuple[int, int, int],
    new: tuple[int, int, int],
) -> None:
    """Verify that a Schrödinger transition obeys the dipole selection rules

    Both states must be legal, *n* must change, ``|l − l'|`` must be
    exactly 1 and ``|m − m'|`` at most 1.

    Raises
    ------
    InvariantError
        If the transition is forbidden.
    """
    validate_nlm(*old)
    validate_nlm(*new)
    n, l, m = old
    n2, l2, m2 = new
    if n == n2:
        raise InvariantError(f"Transition {old} -> {new} does not change n")
    if abs(l - l2) != 1:
        raise InvariantError(f"Transition {old} -> {new} violates |l - l'| = 1")
    if abs(m - m2) > 1:
        raise InvariantError(f"Transition {old} -> {new} violates |m - m'| <= 1")


def validate_amplitude(amplitude: float) -> None:
    """Verify that a standing-wave amplitude is in [−1, 1]

    Raises
    ------
    InvariantError
        If the amplitude is out of range or not finite.
    """
    if not -1.0 - AMPLITUDE_TOLERANCE <= amplitude <= 1.0 + AMPLITUDE_TOLERANCE:
        raise InvariantError(f"Amplitude {amplitude!r} outside [-1, 1]")


def validate_wavelength(wavelength: float) -> None:
    """Verify that *wavelength* (nm) is a positive number."""
    if not wavelength > 0:
        raise InvariantError(f"Wavelength must be positive, got {wavelength!r}")
