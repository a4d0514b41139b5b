#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Bohr model: a point electron on one of six circular orbits

The electron sits on orbit ``r(n) = n² · r₁`` and revolves clockwise
with an angular speed that falls off as 1/n².  A photon collides when its
centre comes within ``config.collision_threshold`` of the electron.
Absorption and emission follow :mod:`pyhydrogen.atoms.quantized`.
"""

from __future__ import annotations

from pyhydrogen.atoms.quantized import QuantizedAtom
from pyhydrogen.models.particles import Photon
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.utils.geometry import distance


class BohrModel(QuantizedAtom):
    kind = AtomicModelKind.BOHR

    def angular_speed(self, n: int | None = None) -> float:
        """Orbital angular speed (rad/s) of level *n*."""
        n = self.n if n is None else n
        return self.config.electron_angular_speed / n ** 2

    def advance_electron(self, dt: float) -> None:
        self.electron.advance_angle(-self.angular_speed() * dt)

    def collides(self, photon: Photon) -> bool:
        return distance(photon.position, self.electron_position()) <= self.config.collision_threshold
