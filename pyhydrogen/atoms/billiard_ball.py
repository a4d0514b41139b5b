#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Billiard Ball model: the atom is a hard sphere

Photons that enter the ball bounce back once, deflected by a random
30°–60° towards the side they hit.  Nothing is ever absorbed or emitted.
"""

from __future__ import annotations

import logging
import math

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.models.particles import Photon
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.utils.constants import BILLIARD_BALL_RADIUS, MAX_DEFLECTION, MIN_DEFLECTION
from pyhydrogen.utils.geometry import distance, normalize_angle

logger = logging.getLogger(__name__)


class BilliardBallModel(HydrogenAtom):
    kind = AtomicModelKind.BILLIARD_BALL
    radius: float = BILLIARD_BALL_RADIUS

    def step(self, dt: float) -> None:
        pass

    def collides(self, photon: Photon) -> bool:
        return distance(photon.position, self.position) <= self.radius

    def process_photon(self, photon: Photon) -> None:
        if photon.has_collided_with_atom or not self.collides(photon):
            return
        sign = 1 if photon.position[0] > self.position[0] else -1
        deflection = sign * self.rng.uniform(MIN_DEFLECTION, MAX_DEFLECTION)
        photon.direction = normalize_angle(photon.direction + math.pi + deflection)
        photon.has_collided_with_atom = True
        logger.debug("Deflected photon %d to %.3f rad", photon.id, photon.direction)

    def reset(self) -> None:
        pass
