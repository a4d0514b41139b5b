#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Schrödinger model: the electron as a (n, l, m) orbital

Collisions use the de Broglie brightness ring around the Bohr-equivalent
orbit for *n*.  Transitions must obey the dipole selection rules of
:mod:`pyhydrogen.physics.quantum_numbers`; among the (l', m') allowed for
a target level one is picked uniformly, and spontaneous decays pick the
target level by transition strength.

Special cases
-------------
* (2, 0, 0) is metastable: it has no allowed spontaneous decay, and a
  photon of a matching wavelength is always absorbed there.  A
  :class:`~pyhydrogen.engine.metastable.MetastableHandler` may be
  attached to release the atom.
* Spontaneous photons appear at a random point on the *ground-state*
  orbit, close to the nucleus.
* Stimulated emission needs a reachable (l', m') in the lower level, so
  level 1 can only be reached from l = 1.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from pyhydrogen.atoms.quantized import QuantizedAtom, TransitionRules
from pyhydrogen.atoms.standing_wave import amplitude, ring_collides
from pyhydrogen.models.particles import Photon, SchrodingerElectron
from pyhydrogen.models.records import AtomicModelKind, QuantumNumbers
from pyhydrogen.physics.quantum_numbers import (
    choose_lower_n,
    choose_successor,
    is_metastable,
    stimulated_emission_allowed,
)
from pyhydrogen.physics.sampling import random_angle
from pyhydrogen.utils.geometry import polar_to_cartesian
from pyhydrogen.utils.observable import Scope

if TYPE_CHECKING:
    from pyhydrogen.engine.metastable import MetastableHandler

logger = logging.getLogger(__name__)


class OrbitalTransitionRules(TransitionRules):
    """Target-state policy for (n, l, m) electrons

    Each method needs a random source for the uniform (l', m') choice;
    it is taken from the owning atom.
    """

    def __init__(self, atom: SchrodingerModel) -> None:
        super().__init__(atom.table)
        self.atom = atom

    def absorption_target(
        self, electron: SchrodingerElectron, wavelength: float
    ) -> QuantumNumbers | None:
        n_target = self.table.higher_state_for(electron.n.value, wavelength)
        if n_target is None:
            return None
        return choose_successor(self.atom.rng, electron.nlm.value, n_target)

    def stimulated_emission_target(
        self, electron: SchrodingerElectron, wavelength: float
    ) -> QuantumNumbers | None:
        nlm = electron.nlm.value
        n_target = self.table.lower_state_for(nlm.n, wavelength)
        if n_target is None or not stimulated_emission_allowed(nlm, n_target):
            return None
        return choose_successor(self.atom.rng, nlm, n_target)

    def spontaneous_emission_target(
        self, electron: SchrodingerElectron, rng: np.random.Generator
    ) -> QuantumNumbers | None:
        nlm = electron.nlm.value
        n_target = choose_lower_n(rng, nlm.n, nlm.l, self.table)
        if n_target is None:
            return None
        return choose_successor(rng, nlm, n_target)

    def absorption_is_certain(self, electron: SchrodingerElectron) -> bool:
        return is_metastable(electron.nlm.value)


class SchrodingerModel(QuantizedAtom):
    kind = AtomicModelKind.SCHRODINGER

    electron: SchrodingerElectron
    metastable_handler: MetastableHandler | None = None

    def _create_electron(self, scope: Scope | None) -> SchrodingerElectron:
        return SchrodingerElectron(self.config.ground_orbit_radius, scope)

    def _create_rules(self) -> TransitionRules:
        return OrbitalTransitionRules(self)

    @property
    def nlm(self) -> QuantumNumbers:
        return self.electron.nlm.value

    @property
    def is_metastable(self) -> bool:
        return is_metastable(self.nlm)

    @property
    def ring_threshold(self) -> float:
        return self.config.collision_threshold + self.config.ring_thickness

    def advance_electron(self, dt: float) -> None:
        self.electron.advance_angle(-self.config.standing_wave_angular_speed * dt)

    def collides(self, photon: Photon) -> bool:
        return ring_collides(photon.position, self.position, self.orbit_radius(), self.ring_threshold)

    def amplitude(self, angle: float) -> float:
        return amplitude(self.n, angle, self.electron.angle.value)

    def spontaneous_emission_position(self) -> np.ndarray:
        return self.position + polar_to_cartesian(
            self.config.ground_orbit_radius, random_angle(self.rng)
        )

    def step(self, dt: float) -> None:
        self.advance_electron(dt)
        if self.metastable_handler is not None:
            self.metastable_handler.step(dt)
        self.quantum.step(dt)

    def set_nlm(self, nlm: QuantumNumbers | tuple[int, int, int]) -> None:
        """Place the electron in *nlm* directly, as a state restore."""
        if not isinstance(nlm, QuantumNumbers):
            nlm = QuantumNumbers(*nlm)
        self.apply_state(nlm)
