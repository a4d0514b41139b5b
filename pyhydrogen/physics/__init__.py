#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Pure physics: energy levels, transition table, selection rules, orbitals

Nothing in this sub-package holds mutable state; the transition table is
built once and shared through
:func:`~pyhydrogen.physics.transitions.get_transition_table`.
"""

from __future__ import annotations

from pyhydrogen.physics.orbits import energy, orbit_radius
from pyhydrogen.physics.transitions import TransitionTable, get_transition_table
from pyhydrogen.physics.wavefunction import density, laguerre, legendre, probability_density

__all__ = [
    "energy",
    "orbit_radius",
    "TransitionTable",
    "get_transition_table",
    "density",
    "laguerre",
    "legendre",
    "probability_density",
]
