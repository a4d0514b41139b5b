#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Atomic models

Six models share the :class:`~pyhydrogen.atoms.base.HydrogenAtom`
interface:

* :class:`~pyhydrogen.atoms.billiard_ball.BilliardBallModel`
* :class:`~pyhydrogen.atoms.plum_pudding.PlumPuddingModel`
* :class:`~pyhydrogen.atoms.classical_solar_system.ClassicalSolarSystemModel`
* :class:`~pyhydrogen.atoms.bohr.BohrModel`
* :class:`~pyhydrogen.atoms.de_broglie.DeBroglieModel`
* :class:`~pyhydrogen.atoms.schrodinger.SchrodingerModel`

The last three delegate absorption and emission to
:class:`~pyhydrogen.atoms.quantized.QuantizedBehavior`.
"""

from __future__ import annotations

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.atoms.billiard_ball import BilliardBallModel
from pyhydrogen.atoms.bohr import BohrModel
from pyhydrogen.atoms.classical_solar_system import ClassicalSolarSystemModel
from pyhydrogen.atoms.de_broglie import DeBroglieModel
from pyhydrogen.atoms.plum_pudding import PlumPuddingModel
from pyhydrogen.atoms.schrodinger import SchrodingerModel
from pyhydrogen.atoms.standing_wave import DeBroglieRepresentation

__all__ = [
    "HydrogenAtom",
    "BilliardBallModel",
    "PlumPuddingModel",
    "ClassicalSolarSystemModel",
    "BohrModel",
    "DeBroglieModel",
    "SchrodingerModel",
    "DeBroglieRepresentation",
]
