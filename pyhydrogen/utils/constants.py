#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Physical and simulation constants used across PyHydrogen

Energies are in **eV**, wavelengths in **nm**, lengths and speeds in
abstract simulation units (the observation box is ``BOX_WIDTH`` units
wide), angles in **radians** and times in **seconds**.

The energy-level and wavelength constants follow the rounded values used
throughout introductory treatments of the Bohr atom (E₁ = −13.6 eV,
hc ≈ 1240 eV·nm) so that the transition table reproduces the familiar
integer Lyman/Balmer/Paschen wavelengths [1]_.

References
----------
.. [1] NIST Atomic Spectra Database, Hydrogen (H I) lines,
   https://physics.nist.gov/PhysRefData/ASD/lines_form.html
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Hydrogen energy levels
# ---------------------------------------------------------------------------

GROUND_STATE_ENERGY: float = -13.6
"""Energy of the n = 1 level, E₁ (eV)."""

HC_EV_NM: float = 1240.0
"""Product of Planck's constant and the speed of light (eV·nm)."""

GROUND_STATE: int = 1
"""Principal quantum number of the ground state."""

MAX_STATE: int = 6
"""Highest principal quantum number modelled."""

MAX_LEGENDRE_L: int = 6
"""Largest orbital quantum number the angular solver accepts."""

METASTABLE_STATE: tuple[int, int, int] = (2, 0, 0)
"""The (n, l, m) state from which spontaneous decay is forbidden."""

# ---------------------------------------------------------------------------
# Spectrum
# ---------------------------------------------------------------------------

MIN_VISIBLE_WAVELENGTH: int = 380
"""Short-wavelength edge of the visible band (nm)."""

MAX_VISIBLE_WAVELENGTH: int = 780
"""Long-wavelength edge of the visible band (nm)."""

MIN_MONOCHROMATIC_WAVELENGTH: int = 92
"""Shortest wavelength the light source can produce (nm)."""

MAX_MONOCHROMATIC_WAVELENGTH: int = MAX_VISIBLE_WAVELENGTH
"""Longest wavelength the light source can produce (nm)."""

DEFAULT_MONOCHROMATIC_WAVELENGTH: int = MIN_VISIBLE_WAVELENGTH
"""Initial wavelength of the light in monochromatic mode (nm)."""

PLUM_PUDDING_EMISSION_WAVELENGTH: int = 150
"""Wavelength of every photon re-emitted by the plum-pudding atom (nm)."""

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

BOX_WIDTH: float = 400.0
"""Width of the observation region."""

BOX_HEIGHT: float = 400.0
"""Height of the observation region."""

GROUND_ORBIT_RADIUS: float = 5.0
"""Radius of the n = 1 orbit; higher orbits scale as n²."""

ELECTRON_DIAMETER: float = 9.0
PHOTON_DIAMETER: float = 30.0
PROTON_DIAMETER: float = 15.0
NEUTRON_DIAMETER: float = 11.0

COLLISION_THRESHOLD: float = PHOTON_DIAMETER / 2 + ELECTRON_DIAMETER / 2
"""Distance at which a photon and an electron, treated as points, collide."""

RING_THICKNESS: float = 3.0
"""Extra width of the brightness ring used for ring collisions."""

ORBIT_3D_Y_SCALE: float = 0.35
"""Vertical squash applied to orbits in the pseudo-3D de Broglie view."""

RADIAL_OFFSET_FACTOR: float = 0.45
"""Radial-distance wave excursion, in units of the ground orbit radius."""

BILLIARD_BALL_RADIUS: float = 50.0
PLUM_PUDDING_RADIUS: float = 50.0

# ---------------------------------------------------------------------------
# Dynamics
# ---------------------------------------------------------------------------

PHOTON_SPEED: float = 300.0
"""Photon speed (units/s)."""

PHOTON_DIRECTION: float = math.pi / 2
"""Direction of photons emitted by the light source (straight up)."""

MAX_LIGHT_PHOTONS: int = 20
"""Number of light photons that may occupy the box at once."""

TRANSITION_WAVELENGTHS_WEIGHT: float = 0.40
"""Probability that white light picks a ground-state absorption line."""

ELECTRON_ANGULAR_SPEED: float = math.radians(600.0)
"""Angular speed of the n = 1 Bohr electron (rad/s)."""

STANDING_WAVE_ANGULAR_SPEED: float = math.radians(600.0)
"""Oscillation rate of the de Broglie standing wave (rad/s)."""

ABSORPTION_PROBABILITY: float = 0.5
"""Chance that a colliding photon of a matching wavelength is absorbed."""

STIMULATED_EMISSION_PROBABILITY: float = 0.5
"""Chance that a colliding photon of a matching wavelength stimulates emission."""

MIN_TIME_IN_STATE: float = 0.5
"""Minimum dwell time before spontaneous emission may occur (s)."""

STATE_LIFETIME: float = 0.5
"""Time scale of the growing spontaneous-emission hazard (s)."""

EXCITE_ATOM_INTERVAL: float = 2.0
"""Interval between photons injected to release a metastable atom (s)."""

MAX_SPECTROMETER_SNAPSHOTS: int = 3
"""Maximum number of live spectrometer snapshots."""

# Classical solar system

ORBIT_START_DISTANCE: float = 150.0
ORBIT_DECAY_RATE: float = 220.0
"""Inward speed of the classical electron (units/s)."""

MIN_ORBIT_DISTANCE: float = 5.0
CLASSICAL_ANGULAR_SPEED: float = math.radians(600.0)
ANGULAR_SPEED_SCALE: float = 1.008
"""Per-step growth of the classical electron's angular speed."""

# Plum pudding

PLUM_PUDDING_ABSORPTION_PROBABILITY: float = 0.1
PLUM_PUDDING_EMISSION_PROBABILITY: float = 0.1
PLUM_PUDDING_ELECTRON_SPEED: float = 100.0
PLUM_PUDDING_TRIPS: int = 6
"""One-way trips the excited plum-pudding electron makes before emitting."""

MAX_PLUM_PUDDING_PHOTONS: int = 1

# Billiard ball

MIN_DEFLECTION: float = math.radians(30.0)
MAX_DEFLECTION: float = math.radians(60.0)

# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

TIME_SPEED_SCALES: dict[str, float] = {
    "fast": 2.0,
    "normal": 1.0,
    "slow": 0.25,
}
"""Multipliers applied to ``dt`` for each time-speed setting."""

FRAME_DT: float = 1.0 / 60.0
"""Time step used by ``step_once`` while paused (s)."""
