#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Energy-level and orbit formulas shared by every quantized model

All functions are pure.  ``energy`` and ``orbit_radius`` validate *n*
and raise :class:`~pyhydrogen.exceptions.InvariantError` outside [1, 6].

Formulas
--------
* E(n) = E₁ / n², with E₁ = −13.6 eV
* r(n) = n² · r₁
* E = hc / λ, with hc = 1240 eV·nm
"""

from __future__ import annotations

from pyhydrogen.utils.constants import (
    GROUND_ORBIT_RADIUS,
    GROUND_STATE_ENERGY,
    HC_EV_NM,
)
from pyhydrogen.utils.validation import validate_n, validate_wavelength


def energy(n: int) -> float:
    """Energy of level *n* in eV

    Examples
    --------
    >>> energy(2)
    -3.4
    """
    validate_n(n)
    return GROUND_STATE_ENERGY / n ** 2


def orbit_radius(n: int, ground_orbit_radius: float = GROUND_ORBIT_RADIUS) -> float:
    """Radius of orbit *n*: ``n² · ground_orbit_radius``."""
    validate_n(n)
    return n ** 2 * ground_orbit_radius


def transition_energy(n1: int, n2: int) -> float:
    """Energy gap |E(n2) − E(n1)| in eV."""
    return abs(energy(n2) - energy(n1))


def photon_energy(wavelength: float) -> float:
    """Photon energy (eV) for *wavelength* (nm)."""
    validate_wavelength(wavelength)
    return HC_EV_NM / wavelength


def photon_wavelength(photon_energy_ev: float) -> float:
    """Wavelength (nm) of a photon carrying *photon_energy_ev*; inverse of
    :func:`photon_energy`."""
    if not photon_energy_ev > 0:
        raise ValueError(f"Photon energy must be positive, got {photon_energy_ev!r}")
    return HC_EV_NM / photon_energy_ev


def transition_wavelength(n1: int, n2: int) -> float:
    """Unrounded wavelength (nm) of the line between *n1* and *n2*."""
    if n1 == n2:
        raise ValueError(f"No transition between identical states n={n1}")
    return photon_wavelength(transition_energy(n1, n2))
