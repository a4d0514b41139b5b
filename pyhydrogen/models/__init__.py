#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Particle primitives and typed records

Particles are mutable state holders owned by exactly one atom or by the
photon pool; records are immutable values passed between layers.
"""

from __future__ import annotations

from pyhydrogen.models.particles import (
    ClassicalSolarSystemElectron,
    Electron,
    Neutron,
    Particle,
    Photon,
    PlumPuddingElectron,
    Proton,
    QuantumElectron,
    SchrodingerElectron,
)
from pyhydrogen.models.records import (
    AtomicModelKind,
    QuantumNumbers,
    SpectrometerDataPoint,
    SpectrometerSnapshot,
    StateTransition,
)

__all__ = [
    "Particle",
    "Photon",
    "Proton",
    "Neutron",
    "Electron",
    "PlumPuddingElectron",
    "ClassicalSolarSystemElectron",
    "QuantumElectron",
    "SchrodingerElectron",
    "AtomicModelKind",
    "QuantumNumbers",
    "StateTransition",
    "SpectrometerDataPoint",
    "SpectrometerSnapshot",
]
