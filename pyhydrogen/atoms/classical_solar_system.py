#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Classical Solar System model: an orbiting electron that radiates away

Classical electrodynamics makes an accelerating charge lose energy, so
the electron spirals into the proton.  It starts at a random angle on a
wide orbit, moves clockwise with an angular speed that grows by a fixed
factor every step while the orbit shrinks at a constant rate, and
finally sits on the proton.  Photons pass through unaffected.
"""

from __future__ import annotations

import logging

import numpy as np

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.config import SimulationConfig
from pyhydrogen.models.particles import ClassicalSolarSystemElectron, Photon
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.physics.sampling import random_angle
from pyhydrogen.utils.constants import (
    ANGULAR_SPEED_SCALE,
    MIN_ORBIT_DISTANCE,
    ORBIT_DECAY_RATE,
)
from pyhydrogen.utils.geometry import normalize_angle, polar_to_cartesian
from pyhydrogen.utils.observable import Scope

logger = logging.getLogger(__name__)


class ClassicalSolarSystemModel(HydrogenAtom):
    kind = AtomicModelKind.CLASSICAL_SOLAR_SYSTEM

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        scope: Scope | None = None,
        label: str | None = None,
    ) -> None:
        super().__init__(config, rng, scope, label)
        self.electron = ClassicalSolarSystemElectron(
            random_angle(rng), self.child_scope("electron")
        )
        self._moved = False

    def step(self, dt: float) -> None:
        electron = self.electron
        if electron.has_collapsed:
            return
        self._moved = True
        distance = electron.orbit_distance.value - ORBIT_DECAY_RATE * dt
        if distance <= MIN_ORBIT_DISTANCE:
            electron.orbit_distance.set(0.0)
            electron.position = self.position.copy()
            logger.debug("Classical electron collapsed onto the proton")
            return
        electron.angular_speed *= ANGULAR_SPEED_SCALE
        angle = normalize_angle(electron.orbit_angle.value - electron.angular_speed * dt)
        electron.orbit_distance.set(distance)
        electron.orbit_angle.set(angle)
        electron.position = self.position + polar_to_cartesian(distance, angle)

    def collides(self, photon: Photon) -> bool:
        return False

    def process_photon(self, photon: Photon) -> None:
        pass

    def reset(self) -> None:
        """Restart the spiral, from a fresh random angle once the electron has moved."""
        self.electron.reset(random_angle(self.rng) if self._moved else None)
        self._moved = False
