#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Plum Pudding model: an electron embedded in a blob of positive charge

A photon that hits the resting electron is absorbed with a small
probability.  The excited electron then oscillates horizontally through
the pudding for a fixed number of one-way trips, comes back to rest at
the centre, and eventually re-emits a single ultraviolet photon in a
random direction.  Only one photon is held at a time.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.config import SimulationConfig
from pyhydrogen.models.particles import OscillationDirection, Photon, PlumPuddingElectron
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.physics.sampling import random_angle
from pyhydrogen.utils.constants import (
    MAX_PLUM_PUDDING_PHOTONS,
    PLUM_PUDDING_ABSORPTION_PROBABILITY,
    PLUM_PUDDING_ELECTRON_SPEED,
    PLUM_PUDDING_EMISSION_PROBABILITY,
    PLUM_PUDDING_EMISSION_WAVELENGTH,
    PLUM_PUDDING_RADIUS,
    PLUM_PUDDING_TRIPS,
)
from pyhydrogen.utils.geometry import distance
from pyhydrogen.utils.observable import Scope

logger = logging.getLogger(__name__)


class PlumPuddingModel(HydrogenAtom):
    kind = AtomicModelKind.PLUM_PUDDING
    radius: float = PLUM_PUDDING_RADIUS

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        scope: Scope | None = None,
        label: str | None = None,
    ) -> None:
        super().__init__(config, rng, scope, label)
        self.electron = PlumPuddingElectron(self.child_scope("electron"))
        self.photons_absorbed = 0
        self._trips_remaining = 0

    @property
    def amplitude(self) -> float:
        """Largest horizontal excursion of the oscillating electron."""
        return self.radius - self.electron.radius

    def collides(self, photon: Photon) -> bool:
        return distance(photon.position, self.electron.position) <= self.config.collision_threshold

    def process_photon(self, photon: Photon) -> None:
        if (
            photon.was_emitted_by_atom
            or photon.has_collided_with_atom
            or self.electron.is_moving.value
            or self.photons_absorbed >= MAX_PLUM_PUDDING_PHOTONS
            or not self.collides(photon)
        ):
            return
        photon.has_collided_with_atom = True
        if self.rng.random() < PLUM_PUDDING_ABSORPTION_PROBABILITY:
            self.photons_absorbed += 1
            self._trips_remaining = PLUM_PUDDING_TRIPS
            self.electron.oscillation_direction.set(OscillationDirection.RIGHT)
            self.electron.is_moving.set(True)
            self.absorb_photon(photon)

    def step(self, dt: float) -> None:
        if self.electron.is_moving.value:
            self._move_electron(dt)
        elif self.photons_absorbed > 0 and self.rng.random() < PLUM_PUDDING_EMISSION_PROBABILITY:
            self.photons_absorbed -= 1
            self.emit_photon(
                PLUM_PUDDING_EMISSION_WAVELENGTH,
                self.electron.position.copy(),
                random_angle(self.rng),
            )

    def _move_electron(self, dt: float) -> None:
        electron = self.electron
        sign = 1.0 if electron.oscillation_direction.value is OscillationDirection.RIGHT else -1.0
        x = electron.position[0] - self.position[0]
        x_new = x + sign * PLUM_PUDDING_ELECTRON_SPEED * dt

        if self._trips_remaining == 0:
            if x * x_new <= 0:
                x_new = 0.0
                electron.is_moving.set(False)
                logger.debug("Plum pudding electron back at rest")
        elif abs(x_new) >= self.amplitude:
            x_new = math.copysign(self.amplitude, x_new)
            self._trips_remaining -= 1
            electron.oscillation_direction.set(
                OscillationDirection.LEFT if sign > 0 else OscillationDirection.RIGHT
            )

        electron.position = self.position + np.array([x_new, 0.0])

    def reset(self) -> None:
        self.electron.reset()
        self.photons_absorbed = 0
        self._trips_remaining = 0
