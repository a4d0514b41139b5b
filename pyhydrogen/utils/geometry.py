#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Two-dimensional geometry helpers

Positions are ``float64`` NumPy arrays of shape ``(2,)``.  The y axis
points *up*, so a direction of π/2 moves a particle towards larger y.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

TWO_PI: float = 2.0 * math.pi


def as_point(x: float, y: float) -> np.ndarray:
    """Return a new ``(2,)`` float64 position array."""
    return np.array([x, y], dtype="f8")


def polar_to_cartesian(radius: float, angle: float) -> np.ndarray:
    """Convert polar coordinates to a Cartesian offset

    Parameters
    ----------
    radius : float
        Distance from the origin.
    angle : float
        Angle in radians, measured counter-clockwise from +x.

    Returns
    -------
    numpy.ndarray
        Offset ``[radius·cos(angle), radius·sin(angle)]``.
    """
    return as_point(radius * math.cos(angle), radius * math.sin(angle))


def normalize_angle(angle: float) -> float:
    """Wrap *angle* into [0, 2π)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0:
        wrapped += TWO_PI
    # fmod of a tiny negative angle can round up to exactly 2π
    return 0.0 if wrapped >= TWO_PI else wrapped


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return float(math.hypot(a[0] - b[0], a[1] - b[1]))


def nearest_point_on_ellipse(
    semi_major: float,
    semi_minor: float,
    point: np.ndarray,
    iterations: int = 3,
) -> np.ndarray:
    """Nearest point on an axis-aligned ellipse centred at the origin

    Uses the trigonometry-free iteration that walks the evolute of the
    ellipse; three iterations are accurate to well under a pixel for the
    eccentricities used here.

    Parameters
    ----------
    semi_major : float
        Semi-axis along x.
    semi_minor : float
        Semi-axis along y.
    point : numpy.ndarray
        Query point relative to the ellipse centre.
    iterations : int, optional
        Number of refinement iterations.

    Returns
    -------
    numpy.ndarray
        The closest point on the ellipse.

    References
    ----------
    .. [1] L. Eberly, "Distance from a Point to an Ellipse", Geometric
       Tools (2013).
    """
    a, b = float(semi_major), float(semi_minor)
    px, py = abs(float(point[0])), abs(float(point[1]))
    tx = ty = math.sqrt(0.5)

    for _ in range(iterations):
        x = a * tx
        y = b * ty
        ex = (a * a - b * b) * tx ** 3 / a
        ey = (b * b - a * a) * ty ** 3 / b
        r = math.hypot(x - ex, y - ey)
        q = math.hypot(px - ex, py - ey)
        if q == 0.0:
            break
        tx = min(1.0, max(0.0, ((px - ex) * r / q + ex) / a))
        ty = min(1.0, max(0.0, ((py - ey) * r / q + ey) / b))
        t = math.hypot(tx, ty)
        tx /= t
        ty /= t

    return as_point(math.copysign(a * tx, point[0]), math.copysign(b * ty, point[1]))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle

    Parameters
    ----------
    min_x, min_y, max_x, max_y : float
        Edges of the rectangle.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def centered(cls, width: float, height: float) -> Bounds:
        """Rectangle of the given size centred on the origin."""
        return cls(-width / 2, -height / 2, width / 2, height / 2)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    def contains(self, point: np.ndarray) -> bool:
        """``True`` if *point* lies inside or on the edge."""
        return bool(
            self.min_x <= point[0] <= self.max_x
            and self.min_y <= point[1] <= self.max_y
        )
