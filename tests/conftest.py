#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyHydrogen tests

Every fixture that involves randomness uses a fixed seed so the tests
are reproducible.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from pyhydrogen.config import SimulationConfig
from pyhydrogen.engine.simulation import HydrogenAtomSimulation
from pyhydrogen.models.particles import Photon
from pyhydrogen.physics.transitions import TransitionTable, get_transition_table


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator"""
    return np.random.default_rng(12345)


@pytest.fixture
def config() -> SimulationConfig:
    """Default simulation parameters"""
    return SimulationConfig()


@pytest.fixture
def certain_config() -> SimulationConfig:
    """Parameters where every matching photon is absorbed or stimulates emission"""
    return SimulationConfig(
        absorption_probability=1.0,
        stimulated_emission_probability=1.0,
    )


@pytest.fixture
def fast_decay_config() -> SimulationConfig:
    """Parameters where excited states decay almost immediately"""
    return SimulationConfig(min_time_in_state=0.0, state_lifetime=0.05)


@pytest.fixture
def table() -> TransitionTable:
    """The shared transition table"""
    return get_transition_table()


@pytest.fixture
def simulation() -> HydrogenAtomSimulation:
    """Seeded simulation with default parameters"""
    return HydrogenAtomSimulation(seed=2024)


@pytest.fixture
def make_photon():
    """Factory for light photons travelling straight up"""

    def _make(wavelength: float, x: float = 0.0, y: float = 0.0) -> Photon:
        return Photon(wavelength, (x, y), math.pi / 2)

    return _make
