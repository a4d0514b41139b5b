#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Absorption and emission state machine shared by the quantized models

The Bohr, de Broglie and Schrödinger atoms differ in *where* a photon
can hit the electron and in *which* states are allowed, but they absorb
and emit the same way.  That shared behaviour lives in
:class:`QuantizedBehavior`, which each atom owns and delegates to; the
state-dependent choices are supplied by a :class:`TransitionRules`
object.

Per photon (at most once, on first contact):

1. **Absorption** — the wavelength excites the current state; accepted
   with ``config.absorption_probability`` unless the rules declare it
   certain.  The photon is destroyed and the electron moves up.
2. **Stimulated emission** — otherwise, the wavelength matches a decay of
   the current state; accepted with
   ``config.stimulated_emission_probability``.  The stimulating photon is
   replaced by a coherent one (same wavelength and direction) emitted at
   the electron.

Per step:

3. **Spontaneous emission** — once ``min_time_in_state`` has passed, the
   electron decays with a hazard that grows linearly with its dwell
   time, emitting isotropically.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Callable

import numpy as np

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.config import SimulationConfig
from pyhydrogen.models.particles import Photon, QuantumElectron
from pyhydrogen.physics.sampling import choose_weighted_value, random_angle
from pyhydrogen.physics.transitions import TransitionTable, get_transition_table
from pyhydrogen.utils.constants import GROUND_STATE
from pyhydrogen.utils.observable import Scope

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Transition rules
# ---------------------------------------------------------------------------

class TransitionRules(ABC):
    """Chooses target states for a quantized electron

    A target is whatever the electron's ``transition_to`` accepts: an
    ``int`` for principal-number electrons, a
    :class:`~pyhydrogen.models.records.QuantumNumbers` for Schrödinger
    electrons.  ``None`` means no transition is available.
    """

    def __init__(self, table: TransitionTable) -> None:
        self.table = table

    @abstractmethod
    def absorption_target(self, electron: QuantumElectron, wavelength: float) -> Any | None:
        ...

    @abstractmethod
    def stimulated_emission_target(self, electron: QuantumElectron, wavelength: float) -> Any | None:
        ...

    @abstractmethod
    def spontaneous_emission_target(
        self, electron: QuantumElectron, rng: np.random.Generator
    ) -> Any | None:
        ...

    def absorption_is_certain(self, electron: QuantumElectron) -> bool:
        return False


class PrincipalTransitionRules(TransitionRules):
    """Rules for electrons described by ``n`` alone (Bohr, de Broglie)"""

    def absorption_target(self, electron: QuantumElectron, wavelength: float) -> int | None:
        return self.table.higher_state_for(electron.n.value, wavelength)

    def stimulated_emission_target(self, electron: QuantumElectron, wavelength: float) -> int | None:
        return self.table.lower_state_for(electron.n.value, wavelength)

    def spontaneous_emission_target(
        self, electron: QuantumElectron, rng: np.random.Generator
    ) -> int | None:
        n = electron.n.value
        candidates = list(range(GROUND_STATE, n))
        weights = [self.table.transition_strength(n, lower) for lower in candidates]
        return choose_weighted_value(rng, candidates, weights)


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------

class QuantizedBehavior:
    """Photon absorption and emission for one quantized atom

    Parameters
    ----------
    atom : HydrogenAtom
        Owner; used to publish absorbed and emitted photons.
    electron : QuantumElectron
        The electron whose state changes.
    rules : TransitionRules
        Target-state policy.
    table : TransitionTable
        Wavelength lookup for emitted photons.
    electron_position : callable
        Returns the electron's absolute position.
    spontaneous_emission_position : callable, optional
        Returns where spontaneous photons appear; the electron position
        by default.
    """

    def __init__(
        self,
        atom: HydrogenAtom,
        electron: QuantumElectron,
        rules: TransitionRules,
        table: TransitionTable,
        electron_position: Callable[[], np.ndarray],
        spontaneous_emission_position: Callable[[], np.ndarray] | None = None,
    ) -> None:
        self.atom = atom
        self.electron = electron
        self.rules = rules
        self.table = table
        self.electron_position = electron_position
        self.spontaneous_emission_position = spontaneous_emission_position or electron_position

    @property
    def config(self) -> SimulationConfig:
        return self.atom.config

    @property
    def rng(self) -> np.random.Generator:
        return self.atom.rng

    def process_photon(self, photon: Photon, collides: bool) -> None:
        """Offer *photon* for absorption, then for stimulated emission."""
        if photon.was_emitted_by_atom or photon.has_collided_with_atom or not collides:
            return
        photon.has_collided_with_atom = True
        if not self._absorb(photon):
            self._stimulate_emission(photon)

    def _absorb(self, photon: Photon) -> bool:
        target = self.rules.absorption_target(self.electron, photon.wavelength)
        if target is None:
            return False
        if not self.rules.absorption_is_certain(self.electron):
            if self.rng.random() >= self.config.absorption_probability:
                return False
        self.electron.transition_to(target)
        self.atom.absorb_photon(photon)
        return True

    def _stimulate_emission(self, photon: Photon) -> bool:
        target = self.rules.stimulated_emission_target(self.electron, photon.wavelength)
        if target is None:
            return False
        if self.rng.random() >= self.config.stimulated_emission_probability:
            return False
        position = self.electron_position()
        self.electron.transition_to(target)
        self.atom.absorb_photon(photon)
        self.atom.emit_photon(photon.wavelength, position, photon.direction)
        return True

    def emission_probability(self, dt: float) -> float:
        """Chance of spontaneous decay during the next *dt* seconds."""
        t = self.electron.time_in_state
        if self.electron.n.value == GROUND_STATE or t < self.config.min_time_in_state:
            return 0.0
        return 1.0 - math.exp(-dt * t / self.config.state_lifetime ** 2)

    def step(self, dt: float) -> None:
        """Advance the dwell timer and evaluate spontaneous emission."""
        self.electron.time_in_state += dt
        p = self.emission_probability(dt)
        if p == 0.0 or self.rng.random() >= p:
            return
        target = self.rules.spontaneous_emission_target(self.electron, self.rng)
        if target is None:
            return
        position = self.spontaneous_emission_position()
        n_old = self.electron.n.value
        self.electron.transition_to(target)
        wavelength = self.table.emission_wavelength(n_old, self.electron.n.value)
        self.atom.emit_photon(wavelength, position, random_angle(self.rng))


# ---------------------------------------------------------------------------
# Quantized atom
# ---------------------------------------------------------------------------

class QuantizedAtom(HydrogenAtom):
    """Base for atoms whose electron occupies discrete orbits

    Subclasses choose the electron type, the transition rules, the
    collision geometry and how the electron moves between steps; the
    absorption and emission logic is delegated to :attr:`quantum`.

    Parameters
    ----------
    config : SimulationConfig
        Shared parameters.
    rng : numpy.random.Generator
        Random source.
    scope : Scope, optional
        Naming scope.
    label : str, optional
        Display label.
    table : TransitionTable, optional
        Line table; the shared one by default.
    """

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        scope: Scope | None = None,
        label: str | None = None,
        table: TransitionTable | None = None,
    ) -> None:
        super().__init__(config, rng, scope, label)
        self.table = table or get_transition_table()
        self.electron = self._create_electron(self.child_scope("electron"))
        self.quantum = QuantizedBehavior(
            self,
            self.electron,
            self._create_rules(),
            self.table,
            electron_position=self.electron_position,
            spontaneous_emission_position=self.spontaneous_emission_position,
        )

    # -- subclass hooks -------------------------------------------------------

    def _create_electron(self, scope: Scope | None) -> QuantumElectron:
        return QuantumElectron(self.config.ground_orbit_radius, scope)

    def _create_rules(self) -> TransitionRules:
        return PrincipalTransitionRules(self.table)

    @abstractmethod
    def advance_electron(self, dt: float) -> None:
        """Move the electron (or its wave) forward by *dt*."""

    # -- capability interface -------------------------------------------------

    @property
    def n(self) -> int:
        return self.electron.n.value

    def orbit_radius(self, n: int | None = None) -> float:
        n = self.n if n is None else n
        return n ** 2 * self.config.ground_orbit_radius

    def electron_position(self) -> np.ndarray:
        return self.position + self.electron.offset()

    def spontaneous_emission_position(self) -> np.ndarray:
        return self.electron_position()

    def absorption_wavelengths(self) -> tuple[int, ...]:
        return self.table.absorption_wavelengths(self.n)

    def process_photon(self, photon: Photon) -> None:
        self.quantum.process_photon(photon, self.collides(photon))

    def step(self, dt: float) -> None:
        self.advance_electron(dt)
        self.quantum.step(dt)

    def reset(self) -> None:
        self.electron.reset()

    def apply_state(
        self,
        state: Any,
        *,
        angle: float | None = None,
        time_in_state: float | None = None,
    ) -> None:
        """Restore a saved electron state without transition side effects

        Parameters
        ----------
        state : int or QuantumNumbers
            Saved quantum state.
        angle : float, optional
            Saved orbital angle.
        time_in_state : float, optional
            Saved dwell time; zero when omitted.
        """
        self.electron.transition_to(state, restoring=True)
        if angle is not None:
            self.electron.angle.set(angle)
        self.electron.time_in_state = 0.0 if time_in_state is None else time_in_state
        logger.debug("%s restored to %s", self.label, self.electron.state)
