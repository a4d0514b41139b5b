#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Standing-wave electron geometry for the de Broglie and Schrödinger models

The electron on orbit *n* is a standing wave with *n* wavelengths around
the circumference.  Its amplitude at position *angle* on the ring, given
the wave's own phase *electron_angle*, is

.. math::

    A(n, \\theta) = \\sin(n\\theta)\\,\\sin(\\phi)

which always lies in [−1, 1].

Collision geometries
--------------------
ring
    The photon's distance from the centre is within the threshold of the
    unperturbed orbit radius.  Used by the radial-distance and
    brightness views and by the Schrödinger model.
ellipse
    The photon is within the threshold of the orbit projected into a
    tilted plane (y squashed by ``ORBIT_3D_Y_SCALE``).  Used by the 3D
    height view.
"""

from __future__ import annotations

import enum
import math

import numpy as np

from pyhydrogen.utils.constants import ORBIT_3D_Y_SCALE, RADIAL_OFFSET_FACTOR
from pyhydrogen.utils.geometry import distance, nearest_point_on_ellipse
from pyhydrogen.utils.validation import validate_amplitude


class DeBroglieRepresentation(enum.Enum):
    """How the standing wave is drawn, which also selects collision geometry"""

    RADIAL_DISTANCE = "radialDistance"
    HEIGHT_3D = "3DHeight"
    BRIGHTNESS = "brightness"


def amplitude(n: int, angle: float, electron_angle: float) -> float:
    """Standing-wave amplitude at *angle* on orbit *n*

    Raises
    ------
    InvariantError
        If the result falls outside [−1, 1].
    """
    value = math.sin(n * angle) * math.sin(electron_angle)
    validate_amplitude(value)
    return value


def radial_distance(
    n: int,
    angle: float,
    electron_angle: float,
    ground_orbit_radius: float,
) -> float:
    """Distance from the centre of the radial-distance wave at *angle*."""
    offset = RADIAL_OFFSET_FACTOR * ground_orbit_radius
    return n ** 2 * ground_orbit_radius + offset * amplitude(n, angle, electron_angle)


def brightness(n: int, angle: float, electron_angle: float) -> float:
    """Amplitude mapped to [0, 1] for the brightness view."""
    return (amplitude(n, angle, electron_angle) + 1.0) / 2.0


def ring_collides(
    photon_position: np.ndarray,
    center: np.ndarray,
    orbit_radius: float,
    threshold: float,
) -> bool:
    """Photon within *threshold* of a circular orbit."""
    return abs(distance(photon_position, center) - orbit_radius) <= threshold


def ellipse_collides(
    photon_position: np.ndarray,
    center: np.ndarray,
    orbit_radius: float,
    threshold: float,
    y_scale: float = ORBIT_3D_Y_SCALE,
) -> bool:
    """Photon within *threshold* of the tilted orbit ellipse."""
    relative = photon_position - center
    nearest = nearest_point_on_ellipse(orbit_radius, orbit_radius * y_scale, relative)
    return distance(relative, nearest) <= threshold
