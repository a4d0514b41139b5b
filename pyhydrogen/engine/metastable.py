#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Release of a Schrödinger atom stuck in the metastable (2, 0, 0) state

No spontaneous decay leaves (2, 0, 0), so without help the atom would
sit there for the rest of the run.  The handler watches the atom's state
and the light:

* white light on — every ``config.excite_atom_interval`` seconds it
  injects a photon the atom can absorb, fired straight up from the
  bottom centre of the box;
* monochromatic light — it instead enables :meth:`MetastableHandler.excite_atom`,
  a user action doing the same once.

The interval timer runs only while the handler is active and restarts
whenever it becomes inactive.
"""

from __future__ import annotations

import logging

from pyhydrogen.atoms.schrodinger import SchrodingerModel
from pyhydrogen.engine.light_source import LightMode, LightSource
from pyhydrogen.models.particles import Photon
from pyhydrogen.physics.sampling import choose_uniform
from pyhydrogen.utils.observable import Property, Scope

logger = logging.getLogger(__name__)


class MetastableHandler:
    """Frees a Schrödinger atom from the metastable state

    Parameters
    ----------
    atom : SchrodingerModel
        Observed atom; the handler attaches itself so the atom steps it.
    light : LightSource
        Used to emit the releasing photons.
    scope : Scope, optional
        Naming scope for ``isMetastableState``.

    Attributes
    ----------
    is_metastable_state : Property[bool]
        Mirrors whether the atom is in (2, 0, 0).
    """

    def __init__(
        self,
        atom: SchrodingerModel,
        light: LightSource,
        scope: Scope | None = None,
    ) -> None:
        self.atom = atom
        self.light = light
        self.interval = atom.config.excite_atom_interval
        self.elapsed = 0.0
        self.is_metastable_state = Property(False, "isMetastableState", scope)
        atom.electron.nlm.link(self._on_state_changed)
        atom.metastable_handler = self

    def _on_state_changed(self, nlm, old) -> None:
        self.is_metastable_state.set(self.atom.is_metastable)

    @property
    def is_active(self) -> bool:
        """Metastable, light on, white mode: photons are injected automatically."""
        return (
            self.is_metastable_state.value
            and self.light.is_on.value
            and self.light.mode.value is LightMode.WHITE
        )

    @property
    def excite_enabled(self) -> bool:
        """Whether the manual excite action should be offered."""
        return (
            self.is_metastable_state.value
            and self.light.mode.value is LightMode.MONOCHROMATIC
        )

    def step(self, dt: float) -> None:
        if not self.is_active:
            self.elapsed = 0.0
            return
        self.elapsed += dt
        if self.elapsed >= self.interval:
            self.elapsed = 0.0
            self.excite_atom()

    def excite_atom(self) -> Photon | None:
        """Fire one photon that the metastable atom will absorb

        Returns
        -------
        Photon or None
            The injected photon, or ``None`` if the atom is not metastable.
        """
        if not self.is_metastable_state.value:
            logger.debug("excite_atom ignored: atom is not metastable")
            return None
        wavelengths = self.atom.absorption_wavelengths()
        wavelength = choose_uniform(self.atom.rng, wavelengths)
        logger.debug("Exciting metastable atom with %d nm", wavelength)
        return self.light.emit_photon_at_bottom_center(wavelength)

    def reset(self) -> None:
        self.elapsed = 0.0
        self.is_metastable_state.set(self.atom.is_metastable)
