#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Capability interface shared by every atomic model

Each concrete model is tagged with one member of the closed
:class:`~pyhydrogen.models.records.AtomicModelKind` enumeration and
implements the same small surface: :meth:`HydrogenAtom.step`,
:meth:`HydrogenAtom.collides`, :meth:`HydrogenAtom.process_photon` and
:meth:`HydrogenAtom.reset`.  Quantized models additionally report the
wavelengths their current state can absorb.

Events
------
photon_emitted(photon)
    A new photon was created by the atom; the photon pool adopts it.
photon_absorbed(photon)
    The atom consumed *photon*; the photon pool drops it.

Notes
-----
Atoms never move photons and never look at other photons than the one
they are handed; the engine layer owns the photon pool and the stepping
order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

import numpy as np

from pyhydrogen.config import SimulationConfig
from pyhydrogen.models.particles import Photon, Proton
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.utils.geometry import as_point
from pyhydrogen.utils.observable import Emitter, Scope

logger = logging.getLogger(__name__)


class HydrogenAtom(ABC):
    """Abstract base for atomic models

    Parameters
    ----------
    config : SimulationConfig
        Shared simulation parameters.
    rng : numpy.random.Generator
        Random source for every stochastic decision of this atom.
    scope : Scope, optional
        Naming scope for the atom's observable fields.
    label : str, optional
        Display label; defaults to the kind's display name.
    """

    kind: ClassVar[AtomicModelKind]

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        scope: Scope | None = None,
        label: str | None = None,
    ) -> None:
        self.config = config
        self.rng = rng
        self.scope = scope
        self.label = label or self.kind.display_name
        self.position = as_point(0.0, 0.0)
        self.proton = Proton(self.position)
        self.photon_emitted = Emitter("photonEmitted")
        self.photon_absorbed = Emitter("photonAbsorbed")

    # -- capability interface ----------------------------------------------

    @abstractmethod
    def step(self, dt: float) -> None:
        """Advance the atom's own clock (orbits, timers, decays) by *dt*."""

    @abstractmethod
    def collides(self, photon: Photon) -> bool:
        """Whether *photon* currently overlaps the part of the atom it can hit."""

    @abstractmethod
    def process_photon(self, photon: Photon) -> None:
        """Let the atom react to a live photon after it has moved

        The atom may absorb the photon, deflect it, or use it to stimulate
        an emission.  Photons emitted by an atom pass through untouched.
        """

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial state; calling twice equals calling once."""

    @property
    def is_quantized(self) -> bool:
        return self.kind.is_quantized

    def absorption_wavelengths(self) -> tuple[int, ...] | None:
        """Wavelengths the current state can absorb; ``None`` if not quantized."""
        return None

    # -- helpers ------------------------------------------------------------

    def emit_photon(self, wavelength: float, position: np.ndarray, direction: float) -> Photon:
        """Create an atom-emitted photon and publish it."""
        photon = Photon(
            wavelength,
            position,
            direction,
            self.config.photon_speed,
            was_emitted_by_atom=True,
        )
        logger.debug("%s emitted %s", self.label, photon)
        self.photon_emitted.emit(photon)
        return photon

    def absorb_photon(self, photon: Photon) -> None:
        """Publish that *photon* was consumed."""
        logger.debug("%s absorbed %s", self.label, photon)
        self.photon_absorbed.emit(photon)

    def child_scope(self, name: str) -> Scope | None:
        return self.scope.child(name) if self.scope is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r})"
