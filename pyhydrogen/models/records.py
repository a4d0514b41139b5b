#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed records shared by the physics, atom and engine layers

Hierarchy
---------
::

    AtomicModelKind        — closed set of atomic model variants
    QuantumNumbers         — immutable (n, l, m) triple
    StateTransition        — (lower n, upper n) pair for one spectral line
    SpectrometerDataPoint  — (wavelength, count) pair
    SpectrometerSnapshot   — numbered, immutable copy of spectrometer data

Units
-----
* Wavelengths are in **nm**.
* Counts are numbers of photons.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class AtomicModelKind(enum.Enum):
    """The atomic models that can be simulated

    The *quantized* members own an electron with a principal quantum
    number and respond to photons through the shared absorption and
    emission state machine.
    """

    BILLIARD_BALL = "billiard_ball"
    PLUM_PUDDING = "plum_pudding"
    CLASSICAL_SOLAR_SYSTEM = "classical_solar_system"
    BOHR = "bohr"
    DE_BROGLIE = "de_broglie"
    SCHRODINGER = "schrodinger"

    @property
    def is_quantized(self) -> bool:
        return self in (
            AtomicModelKind.BOHR,
            AtomicModelKind.DE_BROGLIE,
            AtomicModelKind.SCHRODINGER,
        )

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    AtomicModelKind.BILLIARD_BALL: "Billiard Ball",
    AtomicModelKind.PLUM_PUDDING: "Plum Pudding",
    AtomicModelKind.CLASSICAL_SOLAR_SYSTEM: "Classical Solar System",
    AtomicModelKind.BOHR: "Bohr",
    AtomicModelKind.DE_BROGLIE: "de Broglie",
    AtomicModelKind.SCHRODINGER: "Schrödinger",
}


@dataclass(frozen=True, order=True)
class QuantumNumbers:
    """Quantum state (n, l, m) of a Schrödinger electron

    Parameters
    ----------
    n : int
        Principal quantum number.
    l : int
        Orbital (azimuthal) quantum number.
    m : int
        Magnetic quantum number.

    Notes
    -----
    Bounds are not checked here; see
    :func:`pyhydrogen.utils.validation.validate_nlm`.
    """

    n: int
    l: int
    m: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.n, self.l, self.m)

    def __str__(self) -> str:
        return f"({self.n},{self.l},{self.m})"


@dataclass(frozen=True)
class StateTransition:
    """A spectral line between two principal quantum numbers

    Parameters
    ----------
    lower : int
        Lower state n₁.
    upper : int
        Upper state n₂ (n₂ > n₁).
    wavelength : int
        Wavelength of the line, rounded to whole nm.
    """

    lower: int
    upper: int
    wavelength: int


@dataclass(frozen=True)
class SpectrometerDataPoint:
    """Number of photons recorded at one wavelength"""

    wavelength: float
    count: int


@dataclass(frozen=True)
class SpectrometerSnapshot:
    """An immutable copy of spectrometer data

    Parameters
    ----------
    number : int
        Monotonically increasing snapshot index (1-based).
    model_kind : AtomicModelKind
        Atomic model active when the snapshot was taken.
    data_points : tuple[SpectrometerDataPoint, ...]
        Counts sorted by wavelength.
    label : str
        Display label of the model, e.g. ``"Experiment"`` or ``"Bohr"``.
    is_experiment : bool
        ``True`` when taken from the experiment atom rather than a
        predictive model of the same kind.
    """

    number: int
    model_kind: AtomicModelKind
    data_points: tuple[SpectrometerDataPoint, ...]
    label: str = ""
    is_experiment: bool = False

    @property
    def total_count(self) -> int:
        return sum(dp.count for dp in self.data_points)

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(wavelengths, counts)`` as float64 / int64 arrays."""
        wavelengths = np.array([dp.wavelength for dp in self.data_points], dtype="f8")
        counts = np.array([dp.count for dp in self.data_points], dtype="i8")
        return wavelengths, counts
