#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
de Broglie model: the electron as a standing wave on a Bohr orbit

State and transitions are those of the Bohr model (principal quantum
number only).  The electron's angle is the phase of the standing wave,
which oscillates at a fixed rate regardless of *n*.  Collision geometry
depends on the selected :class:`DeBroglieRepresentation`; the wave's
amplitude never affects collisions.
"""

from __future__ import annotations

import logging

import numpy as np

from pyhydrogen.atoms.quantized import QuantizedAtom
from pyhydrogen.atoms.standing_wave import (
    DeBroglieRepresentation,
    amplitude,
    brightness,
    ellipse_collides,
    radial_distance,
    ring_collides,
)
from pyhydrogen.config import SimulationConfig
from pyhydrogen.models.particles import Photon
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.physics.transitions import TransitionTable
from pyhydrogen.utils.observable import Property, Scope

logger = logging.getLogger(__name__)


class DeBroglieModel(QuantizedAtom):
    kind = AtomicModelKind.DE_BROGLIE

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        scope: Scope | None = None,
        label: str | None = None,
        table: TransitionTable | None = None,
        representation: DeBroglieRepresentation = DeBroglieRepresentation.RADIAL_DISTANCE,
    ) -> None:
        super().__init__(config, rng, scope, label, table)
        self.representation = Property(representation, "representation", scope)

    @property
    def ring_threshold(self) -> float:
        """Ring half-width: photon + electron radii plus the ring thickness."""
        return self.config.collision_threshold + self.config.ring_thickness

    def advance_electron(self, dt: float) -> None:
        self.electron.advance_angle(-self.config.standing_wave_angular_speed * dt)

    def collides(self, photon: Photon) -> bool:
        radius = self.orbit_radius()
        if self.representation.value is DeBroglieRepresentation.HEIGHT_3D:
            return ellipse_collides(
                photon.position, self.position, radius, self.config.collision_threshold
            )
        return ring_collides(photon.position, self.position, radius, self.ring_threshold)

    # -- wave shape -----------------------------------------------------------

    def amplitude(self, angle: float) -> float:
        """Wave amplitude at *angle* on the current orbit, in [−1, 1]."""
        return amplitude(self.n, angle, self.electron.angle.value)

    def radial_distance(self, angle: float) -> float:
        return radial_distance(
            self.n, angle, self.electron.angle.value, self.config.ground_orbit_radius
        )

    def brightness(self, angle: float) -> float:
        return brightness(self.n, angle, self.electron.angle.value)

    def reset(self) -> None:
        super().reset()
        self.representation.reset()
