#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Hydrogen orbital solver

Evaluates the (unnormalised in angle) hydrogen wavefunction

.. math::

    \\psi_{nlm}(r, \\theta) = R_{nl}(r) \\, P_l^{|m|}(\\cos\\theta)

where :math:`R_{nl}` is the radial function built from a generalised
Laguerre polynomial and :math:`P_l^m` is the associated Legendre
polynomial.  Both polynomials come from :mod:`scipy.special`.

Radial part
-----------
With scale length *a* (the ground-state orbit radius) and
:math:`\\rho = 2r / (na)`,

.. math::

    R_{nl}(r) = \\sqrt{\\left(\\frac{2}{na}\\right)^3 \\frac{(n-l-1)!}{2n\\,(n+l)!}}
                \\, e^{-\\rho/2} \\rho^l L_{n-l-1}^{2l+1}(\\rho)

Angular part
------------
``scipy.special.lpmv`` includes the Condon–Shortley phase.  Orders are
limited to the states the atom can occupy, l ≤ 6.

References
----------
.. [1] D. J. Griffiths, *Introduction to Quantum Mechanics*, 2nd ed.,
   §4.2 (2005).
"""

from __future__ import annotations

import logging
import math

import numpy as np
from scipy.special import eval_genlaguerre, lpmv

from pyhydrogen.utils.constants import GROUND_ORBIT_RADIUS, MAX_LEGENDRE_L
from pyhydrogen.utils.validation import validate_nlm

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Polynomials
# ---------------------------------------------------------------------------

def laguerre(
    n: int,
    l: int,
    r: float | np.ndarray,
    a: float = GROUND_ORBIT_RADIUS,
) -> float | np.ndarray:
    """Radial function R_nl(r)

    Parameters
    ----------
    n : int
        Principal quantum number.
    l : int
        Orbital quantum number, 0 ≤ l ≤ n − 1.
    r : float or numpy.ndarray
        Distance(s) from the nucleus, r ≥ 0.
    a : float, optional
        Scale length; the n = 1 orbit radius by default.

    Returns
    -------
    float or numpy.ndarray
        R_nl evaluated at *r*, same shape as *r*.
    """
    validate_nlm(n, l, 0)
    r = np.asarray(r, dtype="f8")
    if np.any(r < 0):
        raise ValueError("r must be non-negative")

    rho = 2.0 * r / (n * a)
    norm = math.sqrt(
        (2.0 / (n * a)) ** 3 * math.factorial(n - l - 1) / (2 * n * math.factorial(n + l))
    )
    result = norm * np.exp(-rho / 2.0) * rho ** l * eval_genlaguerre(n - l - 1, 2 * l + 1, rho)
    result = np.asarray(result, dtype="f8")
    return float(result) if result.ndim == 0 else result


def legendre(
    l: int,
    m: int,
    x: float | np.ndarray,
) -> float | np.ndarray:
    """Associated Legendre polynomial P_l^m(x)

    Parameters
    ----------
    l : int
        Degree, 0 ≤ l ≤ 6.
    m : int
        Order, 0 ≤ m ≤ l.
    x : float or numpy.ndarray
        Argument(s), |x| ≤ 1.

    Returns
    -------
    float or numpy.ndarray
        P_l^m evaluated at *x*, same shape as *x*.

    Raises
    ------
    ValueError
        If *l* or *m* are out of range or any |x| > 1.

    Examples
    --------
    >>> legendre(1, 1, 0.0)
    -1.0
    >>> legendre(2, 0, 1.0)
    1.0
    """
    if not 0 <= l <= MAX_LEGENDRE_L:
        raise ValueError(f"l={l} outside the supported range [0, {MAX_LEGENDRE_L}]")
    if not 0 <= m <= l:
        raise ValueError(f"m={m} outside [0, {l}]")
    x = np.asarray(x, dtype="f8")
    if np.any(np.abs(x) > 1.0):
        raise ValueError("|x| must not exceed 1")

    result = np.asarray(lpmv(m, l, x), dtype="f8")
    return float(result) if result.ndim == 0 else result


# ---------------------------------------------------------------------------
# Wavefunction
# ---------------------------------------------------------------------------

def density(
    n: int,
    l: int,
    m: int,
    r: float | np.ndarray,
    cos_theta: float | np.ndarray,
    a: float = GROUND_ORBIT_RADIUS,
) -> float | np.ndarray:
    """Orbital amplitude ``laguerre(n, l, r) · legendre(l, |m|, cos θ)``

    The sign of *m* only selects the azimuthal phase, which is not
    represented, so ±m give identical values.
    """
    validate_nlm(n, l, m)
    return laguerre(n, l, r, a) * legendre(l, abs(m), cos_theta)


def probability_density(
    n: int,
    l: int,
    m: int,
    x: float | np.ndarray,
    y: float | np.ndarray,
    z: float | np.ndarray,
    a: float = GROUND_ORBIT_RADIUS,
) -> float | np.ndarray:
    """Probability density |ψ|² at Cartesian point(s) (x, y, z)

    cos θ is taken as ``|z| / r``; the density is symmetric in z, and the
    origin is assigned cos θ = 1.
    """
    x, y, z = (np.asarray(v, dtype="f8") for v in (x, y, z))
    r = np.sqrt(x * x + y * y + z * z)
    with np.errstate(invalid="ignore", divide="ignore"):
        cos_theta = np.where(r > 0, np.abs(z) / np.where(r > 0, r, 1.0), 1.0)
    cos_theta = np.clip(cos_theta, 0.0, 1.0)
    w = density(n, l, m, r, cos_theta, a)
    result = np.asarray(w) ** 2
    return float(result) if result.ndim == 0 else result


def probability_density_field(
    n: int,
    l: int,
    m: int,
    extent: float,
    resolution: int = 101,
    a: float = GROUND_ORBIT_RADIUS,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Sample |ψ|² on a square grid in the x–z plane (y = 0)

    Parameters
    ----------
    n, l, m : int
        Quantum state.
    extent : float
        Half-width of the square; samples span [−extent, extent].
    resolution : int, optional
        Samples per side.
    a : float, optional
        Scale length.

    Returns
    -------
    xs : numpy.ndarray
        Sample x coordinates, shape ``(resolution,)``.
    zs : numpy.ndarray
        Sample z coordinates, shape ``(resolution,)``.
    field : numpy.ndarray
        Densities, shape ``(resolution, resolution)``, indexed ``[z, x]``.
    """
    if extent <= 0:
        raise ValueError(f"extent must be positive, got {extent}")
    if resolution < 2:
        raise ValueError(f"resolution must be at least 2, got {resolution}")
    xs = np.linspace(-extent, extent, resolution)
    zs = np.linspace(-extent, extent, resolution)
    grid_x, grid_z = np.meshgrid(xs, zs)
    field = probability_density(n, l, m, grid_x, np.zeros_like(grid_x), grid_z, a)
    logger.debug(
        "Density field (%d,%d,%d): %dx%d, max %.3e", n, l, m, resolution, resolution,
        float(np.max(field)),
    )
    return xs, zs, field
