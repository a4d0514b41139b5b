#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Pool of live photons, keyed by photon identity

Each step every photon present at the start of the step is moved; a
photon that leaves the box is dropped (and, if an atom emitted it,
counted by the spectrometer), the rest are handed to the active atom.
Photons created during the step are only moved from the next step on.
"""

from __future__ import annotations

import logging
from typing import Iterator

from pyhydrogen.atoms.base import HydrogenAtom
from pyhydrogen.engine.spectrometer import Spectrometer
from pyhydrogen.models.particles import Photon
from pyhydrogen.utils.geometry import Bounds

logger = logging.getLogger(__name__)


class PhotonPool:
    """Identity-keyed collection of in-flight photons

    Parameters
    ----------
    bounds : Bounds
        Observation region; photons outside it are removed.
    spectrometer : Spectrometer, optional
        Receives the wavelength of every atom-emitted photon that exits.
    """

    def __init__(self, bounds: Bounds, spectrometer: Spectrometer | None = None) -> None:
        self.bounds = bounds
        self.spectrometer = spectrometer
        self._photons: dict[int, Photon] = {}

    def __len__(self) -> int:
        return len(self._photons)

    def __iter__(self) -> Iterator[Photon]:
        return iter(list(self._photons.values()))

    def __contains__(self, photon: object) -> bool:
        return isinstance(photon, Photon) and photon.id in self._photons

    @property
    def photons(self) -> tuple[Photon, ...]:
        return tuple(self._photons.values())

    def add(self, photon: Photon) -> None:
        self._photons[photon.id] = photon

    def remove(self, photon: Photon) -> None:
        """Drop *photon*; removing an absent photon is a no-op."""
        self._photons.pop(photon.id, None)

    def clear(self) -> None:
        if self._photons:
            logger.debug("Clearing %d photons", len(self._photons))
        self._photons.clear()

    # -- atom wiring ------------------------------------------------------------

    def connect(self, atom: HydrogenAtom) -> None:
        """Adopt photons emitted by *atom* and drop those it absorbs."""
        atom.photon_emitted.add_listener(self.add)
        atom.photon_absorbed.add_listener(self.remove)

    def disconnect(self, atom: HydrogenAtom) -> None:
        atom.photon_emitted.remove_listener(self.add)
        atom.photon_absorbed.remove_listener(self.remove)

    # -- stepping -----------------------------------------------------------------

    def step(self, dt: float, atom: HydrogenAtom) -> None:
        """Move every photon, retire escapees, let *atom* process the rest."""
        for photon in list(self._photons.values()):
            if photon.id not in self._photons:
                continue
            photon.move(dt)
            if not self.bounds.contains(photon.position):
                self.remove(photon)
                if photon.was_emitted_by_atom and self.spectrometer is not None:
                    self.spectrometer.record_emission(photon.wavelength)
            else:
                atom.process_photon(photon)
