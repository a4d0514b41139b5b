#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Time-paced stochastic photon source

While on, the light accumulates elapsed time and emits one photon each
time the accumulator reaches ``config.photon_emission_interval``, keeping
the remainder.  The interval is chosen so that at most
``config.max_light_photons`` light photons are in the box at once.

Photons start at a uniformly random x on the bottom edge and travel
straight up.  In white mode the wavelength is, with probability
``config.transition_wavelengths_weight``, one of the lines that excite
the ground state, and otherwise a uniform integer over the whole range;
monochromatic mode always uses the selected wavelength.

The light knows nothing about atoms; consumers subscribe to
:attr:`LightSource.photon_emitted`.
"""

from __future__ import annotations

import enum
import logging

import numpy as np

from pyhydrogen.config import SimulationConfig
from pyhydrogen.exceptions import ConfigurationError
from pyhydrogen.models.particles import Photon
from pyhydrogen.physics.sampling import choose_uniform
from pyhydrogen.physics.transitions import TransitionTable, get_transition_table
from pyhydrogen.utils.constants import GROUND_STATE, PHOTON_DIRECTION
from pyhydrogen.utils.geometry import as_point
from pyhydrogen.utils.observable import Emitter, Property, Scope

logger = logging.getLogger(__name__)


class LightMode(enum.Enum):
    WHITE = "white"
    MONOCHROMATIC = "monochromatic"


class LightSource:
    """Stochastic photon generator at the bottom of the observation box

    Parameters
    ----------
    config : SimulationConfig
        Box geometry, photon speed and wavelength range.
    rng : numpy.random.Generator
        Random source for positions and white-light wavelengths.
    table : TransitionTable, optional
        Line table used to bias white light.
    scope : Scope, optional
        Naming scope for ``isOn``, ``mode`` and ``monochromaticWavelength``.
    """

    def __init__(
        self,
        config: SimulationConfig,
        rng: np.random.Generator,
        table: TransitionTable | None = None,
        scope: Scope | None = None,
    ) -> None:
        self.config = config
        self.rng = rng
        self.table = table or get_transition_table()
        self.bounds = config.bounds
        self.is_on = Property(False, "isOn", scope)
        self.mode = Property(LightMode.WHITE, "mode", scope)
        self.monochromatic_wavelength = Property(
            config.default_monochromatic_wavelength,
            "monochromaticWavelength",
            scope,
            validator=self._validate_wavelength,
        )
        self.photon_emitted = Emitter("photonEmitted")
        self.dt_between_photons = config.photon_emission_interval
        self._dt_since_last_photon = 0.0
        self.is_on.lazy_link(self._on_toggled)

    def _validate_wavelength(self, wavelength: int) -> None:
        lo, hi = self.config.min_wavelength, self.config.max_wavelength
        if not lo <= wavelength <= hi:
            raise ConfigurationError(
                f"Monochromatic wavelength {wavelength} nm outside [{lo}, {hi}]"
            )

    def _on_toggled(self, is_on: bool, was_on: bool) -> None:
        self._dt_since_last_photon = 0.0
        logger.debug("Light %s", "on" if is_on else "off")

    @property
    def wavelength(self) -> int:
        """Monochromatic wavelength, or 0 in white mode."""
        if self.mode.value is LightMode.MONOCHROMATIC:
            return self.monochromatic_wavelength.value
        return 0

    # -- commands -------------------------------------------------------------

    def set_on(self, on: bool = True) -> None:
        self.is_on.set(on)

    def set_mode(self, mode: LightMode | str) -> None:
        self.mode.set(LightMode(mode))

    def set_wavelength(self, wavelength: int) -> None:
        """Select a monochromatic wavelength

        Raises
        ------
        ConfigurationError
            If *wavelength* is outside the configured range.
        """
        self.monochromatic_wavelength.set(int(wavelength))

    def reset(self) -> None:
        self.is_on.reset()
        self.mode.reset()
        self.monochromatic_wavelength.reset()
        self._dt_since_last_photon = 0.0

    # -- emission -------------------------------------------------------------

    def step(self, dt: float) -> Photon | None:
        """Advance by *dt*; emit and return at most one photon."""
        if not self.is_on.value:
            return None
        self._dt_since_last_photon += dt
        if self._dt_since_last_photon < self.dt_between_photons:
            return None
        self._dt_since_last_photon %= self.dt_between_photons
        position = as_point(
            self.rng.uniform(self.bounds.min_x, self.bounds.max_x), self.bounds.min_y
        )
        return self._emit(self.next_wavelength(), position)

    def next_wavelength(self) -> int:
        """Wavelength of the next photon, in whole nm."""
        if self.mode.value is LightMode.MONOCHROMATIC:
            return self.monochromatic_wavelength.value
        if self.rng.random() < self.config.transition_wavelengths_weight:
            return choose_uniform(self.rng, self.table.absorption_wavelengths(GROUND_STATE))
        return int(self.rng.integers(self.config.min_wavelength, self.config.max_wavelength + 1))

    def emit_photon_at_bottom_center(self, wavelength: int) -> Photon:
        """Emit a photon aimed straight at the atom, regardless of on/off."""
        position = as_point(self.bounds.center_x, self.bounds.min_y)
        return self._emit(wavelength, position)

    def _emit(self, wavelength: int, position: np.ndarray) -> Photon:
        photon = Photon(wavelength, position, PHOTON_DIRECTION, self.config.photon_speed)
        self.photon_emitted.emit(photon)
        return photon
