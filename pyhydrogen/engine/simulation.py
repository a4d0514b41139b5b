#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Frame-driven simulation of light interacting with a hydrogen atom

:class:`HydrogenAtomSimulation` owns the light source, the photon pool,
the spectrometer, one instance of every atomic model and the
"experiment" atom (a Schrödinger atom that stands in for real hydrogen).
An external driver calls :meth:`HydrogenAtomSimulation.step` once per
frame.

Step order
----------
1. The light source may emit a photon.
2. Photons move; escapees are retired and the active atom processes the
   rest (collision, absorption, stimulated emission).
3. The active atom advances its own clock (orbit, metastable timer,
   spontaneous emission).

Changing the active atom, by selecting another predictive model or by
switching between experiment and prediction, first clears every photon
and resets the atom being left.

Examples
--------
>>> sim = HydrogenAtomSimulation(seed=1)
>>> sim.select_model(AtomicModelKind.BOHR)
>>> sim.set_model_mode(ModelMode.PREDICTION)
>>> sim.light.set_on()
>>> for _ in range(600):
...     sim.step(1 / 60)
"""

from __future__ import annotations

import enum
import logging

import numpy as np

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.atoms.billiard_ball import BilliardBallModel
from pyhydrogen.atoms.bohr import BohrModel
from pyhydrogen.atoms.classical_solar_system import ClassicalSolarSystemModel
from pyhydrogen.atoms.de_broglie import DeBroglieModel
from pyhydrogen.atoms.plum_pudding import PlumPuddingModel
from pyhydrogen.atoms.schrodinger import SchrodingerModel
from pyhydrogen.config import SimulationConfig
from pyhydrogen.engine.light_source import LightSource
from pyhydrogen.engine.metastable import MetastableHandler
from pyhydrogen.engine.photon_pool import PhotonPool
from pyhydrogen.engine.spectrometer import Spectrometer
from pyhydrogen.exceptions import ConfigurationError, SnapshotLimitError
from pyhydrogen.models.records import AtomicModelKind, SpectrometerSnapshot
from pyhydrogen.physics.transitions import get_transition_table
from pyhydrogen.utils.constants import FRAME_DT, TIME_SPEED_SCALES
from pyhydrogen.utils.observable import Property, Scope

logger = logging.getLogger(__name__)

MODEL_CLASSES: dict[AtomicModelKind, type[HydrogenAtom]] = {
    AtomicModelKind.BILLIARD_BALL: BilliardBallModel,
    AtomicModelKind.PLUM_PUDDING: PlumPuddingModel,
    AtomicModelKind.CLASSICAL_SOLAR_SYSTEM: ClassicalSolarSystemModel,
    AtomicModelKind.BOHR: BohrModel,
    AtomicModelKind.DE_BROGLIE: DeBroglieModel,
    AtomicModelKind.SCHRODINGER: SchrodingerModel,
}
"""Concrete class for each model kind."""


class ModelMode(enum.Enum):
    EXPERIMENT = "experiment"
    PREDICTION = "prediction"


class TimeSpeed(enum.Enum):
    FAST = "fast"
    NORMAL = "normal"
    SLOW = "slow"

    @property
    def scale(self) -> float:
        return TIME_SPEED_SCALES[self.value]


class HydrogenAtomSimulation:
    """Top-level simulation driver

    Parameters
    ----------
    config : SimulationConfig, optional
        Parameters; defaults when omitted.
    rng : numpy.random.Generator, optional
        Shared random source.  Mutually exclusive with *seed*.
    seed : int, optional
        Seed for a new :func:`numpy.random.default_rng` generator.
    scope : Scope, optional
        Root naming scope; ``Scope("hydrogen")`` by default.

    Attributes
    ----------
    models : dict[AtomicModelKind, HydrogenAtom]
        One predictive instance per kind.
    experiment : SchrodingerModel
        The atom shown in experiment mode.
    metastable_handlers : list[MetastableHandler]
        Handlers attached to the two Schrödinger atoms.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        scope: Scope | None = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ConfigurationError("Pass either rng or seed, not both")
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.scope = scope or Scope("hydrogen")
        self.table = get_transition_table()

        self.light = LightSource(self.config, self.rng, self.table, self.scope.child("light"))
        self.spectrometer = Spectrometer(self.config.max_snapshots, self.scope.child("spectrometer"))
        self.photons = PhotonPool(self.config.bounds, self.spectrometer)
        self.light.photon_emitted.add_listener(self.photons.add)

        models_scope = self.scope.child("models")
        self.models: dict[AtomicModelKind, HydrogenAtom] = {
            kind: cls(self.config, self.rng, models_scope.child(kind.value))
            for kind, cls in MODEL_CLASSES.items()
        }
        self.experiment = SchrodingerModel(
            self.config, self.rng, self.scope.child("experiment"), label="Experiment"
        )

        self.metastable_handlers: list[MetastableHandler] = []
        for atom in (self.models[AtomicModelKind.SCHRODINGER], self.experiment):
            self.metastable_handlers.append(
                MetastableHandler(atom, self.light, atom.child_scope("metastableHandler"))
            )

        self.model_mode = Property(ModelMode.EXPERIMENT, "modelMode", self.scope)
        self.selected_kind = Property(AtomicModelKind.BOHR, "predictiveModel", self.scope)
        self.time_speed = Property(TimeSpeed.NORMAL, "timeSpeed", self.scope)
        self.is_playing = Property(True, "isPlaying", self.scope)

        self._active = self._resolve_active()
        self.photons.connect(self._active)

    # -- active atom ------------------------------------------------------------

    @property
    def atom(self) -> HydrogenAtom:
        """The atom currently interacting with light."""
        return self._active

    def _resolve_active(self) -> HydrogenAtom:
        if self.model_mode.value is ModelMode.EXPERIMENT:
            return self.experiment
        return self.models[self.selected_kind.value]

    def _switch_active(self) -> None:
        new = self._resolve_active()
        if new is self._active:
            return
        old = self._active
        self.photons.disconnect(old)
        self.photons.clear()
        old.reset()
        self._active = new
        self.photons.connect(new)
        logger.debug("Active atom: %s -> %s", old.label, new.label)

    def select_model(self, kind: AtomicModelKind | str) -> None:
        """Choose the predictive model (takes effect in prediction mode)."""
        self.selected_kind.set(AtomicModelKind(kind))
        self._switch_active()

    def set_model_mode(self, mode: ModelMode | str) -> None:
        self.model_mode.set(ModelMode(mode))
        self._switch_active()

    # -- clock --------------------------------------------------------------------

    def step(self, dt: float) -> None:
        """Advance one frame of *dt* seconds (scaled by the time speed)

        Does nothing while paused.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if not self.is_playing.value:
            return
        self._step(dt * self.time_speed.value.scale)

    def step_once(self) -> None:
        """Advance one fixed frame while paused."""
        self._step(FRAME_DT * self.time_speed.value.scale)

    def _step(self, dt: float) -> None:
        self.light.step(dt)
        self.photons.step(dt, self._active)
        self._active.step(dt)

    def set_time_speed(self, speed: TimeSpeed | str) -> None:
        self.time_speed.set(TimeSpeed(speed))

    # -- spectrometer ---------------------------------------------------------------

    def take_snapshot(self) -> SpectrometerSnapshot:
        """Snapshot the spectrometer, tagged with the active atom

        Raises
        ------
        SnapshotLimitError
            If the snapshot limit is reached.
        """
        try:
            return self.spectrometer.take_snapshot(
                self._active.kind,
                self._active.label,
                is_experiment=self._active is self.experiment,
            )
        except SnapshotLimitError:
            logger.warning("Snapshot limit of %d reached", self.spectrometer.max_snapshots)
            raise

    # -- reset ------------------------------------------------------------------------

    def reset(self) -> None:
        """Return every component to its initial state; idempotent."""
        self.photons.clear()
        self.light.reset()
        self.spectrometer.reset()
        for atom in (*self.models.values(), self.experiment):
            atom.reset()
        for handler in self.metastable_handlers:
            handler.reset()
        self.model_mode.reset()
        self.selected_kind.reset()
        self.time_speed.reset()
        self.is_playing.reset()
        self._switch_active()
        logger.debug("Simulation reset")
