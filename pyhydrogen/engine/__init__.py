#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Simulation engine: light source, photon pool, spectrometer and driver
"""

from __future__ import annotations

from pyhydrogen.engine.light_source import LightMode, LightSource
from pyhydrogen.engine.metastable import MetastableHandler
from pyhydrogen.engine.photon_pool import PhotonPool
from pyhydrogen.engine.simulation import HydrogenAtomSimulation, ModelMode, TimeSpeed
from pyhydrogen.engine.spectrometer import Spectrometer

__all__ = [
    "LightMode",
    "LightSource",
    "MetastableHandler",
    "PhotonPool",
    "Spectrometer",
    "HydrogenAtomSimulation",
    "ModelMode",
    "TimeSpeed",
]
