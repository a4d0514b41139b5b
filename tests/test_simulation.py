#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the simulation driver
"""

from __future__ import annotations

import numpy as np
import pytest

from pyhydrogen.atoms.bohr import BohrModel
from pyhydrogen.config import SimulationConfig
from pyhydrogen.engine.light_source import LightMode
from pyhydrogen.engine.simulation import HydrogenAtomSimulation, ModelMode, TimeSpeed
from pyhydrogen.exceptions import ConfigurationError, SnapshotLimitError
from pyhydrogen.models.records import AtomicModelKind

DT = 1 / 60


def run(sim: HydrogenAtomSimulation, steps: int) -> None:
    for _ in range(steps):
        sim.step(DT)


class TestConstruction:
    """Test wiring and defaults."""

    def test_defaults(self, simulation: HydrogenAtomSimulation) -> None:
        assert simulation.model_mode.value is ModelMode.EXPERIMENT
        assert simulation.selected_kind.value is AtomicModelKind.BOHR
        assert simulation.atom is simulation.experiment
        assert simulation.atom.label == "Experiment"
        assert set(simulation.models) == set(AtomicModelKind)

    def test_rng_and_seed_exclusive(self) -> None:
        with pytest.raises(ConfigurationError):
            HydrogenAtomSimulation(rng=np.random.default_rng(1), seed=1)

    def test_observable_names(self, simulation: HydrogenAtomSimulation) -> None:
        names = set(simulation.scope)
        assert "hydrogen.light.isOn" in names
        assert "hydrogen.experiment.electron.nlm" in names
        assert "hydrogen.models.bohr.electron.n" in names
        assert "hydrogen.experiment.metastableHandler.isMetastableState" in names


class TestModelSwitching:
    """Test selection of the active atom."""

    def test_switch_clears_photons(self, simulation: HydrogenAtomSimulation) -> None:
        simulation.light.set_on()
        run(simulation, 60)
        assert len(simulation.photons) > 0
        simulation.set_model_mode(ModelMode.PREDICTION)
        assert len(simulation.photons) == 0
        assert isinstance(simulation.atom, BohrModel)

    def test_switch_resets_old_atom(self, simulation: HydrogenAtomSimulation) -> None:
        simulation.set_model_mode("prediction")
        bohr = simulation.atom
        bohr.apply_state(3)
        simulation.select_model(AtomicModelKind.DE_BROGLIE)
        assert bohr.n == 1
        assert simulation.atom is simulation.models[AtomicModelKind.DE_BROGLIE]

    def test_reselect_keeps_photons(self, simulation: HydrogenAtomSimulation) -> None:
        simulation.set_model_mode(ModelMode.PREDICTION)
        simulation.light.set_on()
        run(simulation, 60)
        count = len(simulation.photons)
        simulation.select_model(AtomicModelKind.BOHR)
        assert len(simulation.photons) == count

    def test_selection_ignored_in_experiment(self, simulation: HydrogenAtomSimulation) -> None:
        simulation.select_model("schrodinger")
        assert simulation.atom is simulation.experiment

    def test_old_atom_disconnected(self, simulation: HydrogenAtomSimulation) -> None:
        simulation.set_model_mode(ModelMode.PREDICTION)
        simulation.experiment.emit_photon(656, np.zeros(2), 0.0)
        assert len(simulation.photons) == 0


class TestClock:
    """Test stepping, pausing and time speed."""

    def test_negative_dt(self, simulation: HydrogenAtomSimulation) -> None:
        with pytest.raises(ValueError):
            simulation.step(-0.1)

    def test_paused(self, simulation: HydrogenAtomSimulation) -> None:
        simulation.light.set_on()
        simulation.is_playing.set(False)
        run(simulation, 60)
        assert len(simulation.photons) == 0
        for _ in range(5):
            simulation.step_once()
        assert len(simulation.photons) == 1

    def test_time_speed(self, simulation: HydrogenAtomSimulation) -> None:
        assert TimeSpeed.FAST.scale == 2.0
        assert TimeSpeed.SLOW.scale == 0.25
        emitted = []
        simulation.light.photon_emitted.add_listener(emitted.append)
        simulation.set_time_speed("fast")
        simulation.light.set_on()
        run(simulation, 60)
        # two simulated seconds at one photon every 1/15 s
        assert 29 <= len(emitted) <= 30

    def test_deterministic_with_seed(self) -> None:
        def trace(seed: int):
            sim = HydrogenAtomSimulation(seed=seed)
            sim.light.set_on()
            run(sim, 1800)
            return (
                [(p.wavelength, tuple(p.position)) for p in sim.photons],
                sim.spectrometer.data_points(),
                sim.experiment.nlm,
            )

        assert trace(99) == trace(99)


class TestLightAtomScenarios:
    """End-to-end light/atom interactions."""

    def test_bohr_absorbs_lyman_alpha(self) -> None:
        config = SimulationConfig(absorption_probability=1.0)
        sim = HydrogenAtomSimulation(config, seed=3)
        sim.set_model_mode(ModelMode.PREDICTION)
        sim.light.set_mode(LightMode.MONOCHROMATIC)
        sim.light.set_wavelength(122)
        sim.light.emit_photon_at_bottom_center(122)
        run(sim, 45)
        assert sim.atom.n == 2
        assert len(sim.photons) == 0

    def test_emission_reaches_spectrometer(self) -> None:
        config = SimulationConfig(min_time_in_state=0.0, state_lifetime=0.05)
        sim = HydrogenAtomSimulation(config, seed=5)
        sim.set_model_mode(ModelMode.PREDICTION)
        sim.atom.apply_state(2)
        run(sim, 200)
        assert sim.atom.n == 1
        assert sim.spectrometer.count(122) == 1
        assert sim.spectrometer.data_points()[0].wavelength == 122

    def test_experiment_spectrum_has_hydrogen_lines(self) -> None:
        sim = HydrogenAtomSimulation(seed=11)
        sim.light.set_on()
        run(sim, 6000)
        assert sim.spectrometer.has_data
        lines = set(sim.table.all_wavelengths())
        assert {p.wavelength for p in sim.spectrometer.data_points()} <= lines

    def test_classical_atom_emits_nothing(self) -> None:
        sim = HydrogenAtomSimulation(seed=4)
        sim.set_model_mode(ModelMode.PREDICTION)
        sim.select_model(AtomicModelKind.CLASSICAL_SOLAR_SYSTEM)
        sim.light.set_on()
        run(sim, 600)
        assert not sim.spectrometer.has_data


class TestSnapshotsAndReset:
    """Test snapshots through the driver and full reset."""

    def test_snapshot_tagged_with_active_atom(self, simulation: HydrogenAtomSimulation) -> None:
        snap = simulation.take_snapshot()
        assert snap.model_kind is AtomicModelKind.SCHRODINGER
        assert snap.label == "Experiment"
        assert snap.is_experiment

    def test_predictive_schrodinger_snapshot(self, simulation: HydrogenAtomSimulation) -> None:
        experiment = simulation.take_snapshot()
        simulation.set_model_mode(ModelMode.PREDICTION)
        simulation.select_model(AtomicModelKind.SCHRODINGER)
        predicted = simulation.take_snapshot()
        assert predicted.model_kind is experiment.model_kind
        assert not predicted.is_experiment
        assert experiment.is_experiment

    def test_snapshot_limit(self, simulation: HydrogenAtomSimulation) -> None:
        for _ in range(3):
            simulation.take_snapshot()
        with pytest.raises(SnapshotLimitError):
            simulation.take_snapshot()

    def test_reset_idempotent(self, simulation: HydrogenAtomSimulation) -> None:
        initial = simulation.scope.values()
        simulation.set_model_mode(ModelMode.PREDICTION)
        simulation.select_model(AtomicModelKind.SCHRODINGER)
        simulation.light.set_on()
        simulation.set_time_speed(TimeSpeed.SLOW)
        run(simulation, 300)
        simulation.take_snapshot()

        simulation.reset()
        once = simulation.scope.values()
        simulation.reset()
        twice = simulation.scope.values()

        assert once == twice == initial
        assert len(simulation.photons) == 0
        assert simulation.spectrometer.snapshots == ()
        assert simulation.atom is simulation.experiment
