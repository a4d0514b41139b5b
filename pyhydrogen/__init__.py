#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyHydrogen - light and matter in historical models of the hydrogen atom

Simulates a stream of photons crossing a single hydrogen atom described
by one of six models (billiard ball, plum pudding, classical solar
system, Bohr, de Broglie, Schrödinger) and records the spectrum of the
light the atom emits.  An "experiment" atom, behaving like real
hydrogen, can be compared against each predictive model.

Command line
------------
1. **Transition table**:
   ``python -m pyhydrogen.cli table``

2. **Headless run** (prints the emission spectrum):
   ``python -m pyhydrogen.cli run --mode prediction --model bohr``

3. **Orbital density field** (HDF5):
   ``python -m pyhydrogen.cli density 3 2 1 orbital.h5``

Modules
-------
models
    Particle primitives and typed records.
physics
    Energy levels, transition table, selection rules, orbital solver.
atoms
    The six atomic models and their shared quantized state machine.
engine
    Light source, photon pool, spectrometer, metastable handler and the
    simulation driver.
io
    HDF5 export (requires ``h5py``).
utils
    Constants, geometry, observables and validation.

Examples
--------
>>> from pyhydrogen import HydrogenAtomSimulation, AtomicModelKind
>>> sim = HydrogenAtomSimulation(seed=7)
>>> sim.set_model_mode("prediction")
>>> sim.select_model(AtomicModelKind.SCHRODINGER)
>>> sim.light.set_on()
>>> for _ in range(1200):
...     sim.step(1 / 60)
>>> sim.spectrometer.data_points()  # doctest: +SKIP
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyhydrogen.config import SimulationConfig
from pyhydrogen.engine.light_source import LightMode, LightSource
from pyhydrogen.engine.simulation import HydrogenAtomSimulation, ModelMode, TimeSpeed
from pyhydrogen.engine.spectrometer import Spectrometer
from pyhydrogen.models.records import AtomicModelKind, QuantumNumbers
from pyhydrogen.physics.transitions import TransitionTable, get_transition_table
from pyhydrogen.exceptions import (
    PyHydrogenError,
    InvariantError,
    ConfigurationError,
    SnapshotLimitError,
    ExportError,
)

__all__ = [
    # Version
    "__version__",
    # Simulation
    "HydrogenAtomSimulation",
    "SimulationConfig",
    "ModelMode",
    "TimeSpeed",
    "LightSource",
    "LightMode",
    "Spectrometer",
    # Physics data
    "AtomicModelKind",
    "QuantumNumbers",
    "TransitionTable",
    "get_transition_table",
    # Exceptions
    "PyHydrogenError",
    "InvariantError",
    "ConfigurationError",
    "SnapshotLimitError",
    "ExportError",
]
