#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Simulation configuration

:class:`SimulationConfig` gathers every tunable number of the simulation
in one frozen dataclass.  Defaults come from
:mod:`pyhydrogen.utils.constants`; :meth:`SimulationConfig.validate`
rejects inconsistent values with
:class:`~pyhydrogen.exceptions.ConfigurationError`.

Examples
--------
>>> config = SimulationConfig(absorption_probability=1.0)
>>> config.photon_emission_interval
0.06666666666666667
>>> SimulationConfig.from_mapping({"max_snapshots": 5}).max_snapshots
5
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from pyhydrogen.exceptions import ConfigurationError
from pyhydrogen.utils import constants as C
from pyhydrogen.utils.geometry import Bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Tunable parameters of a simulation run

    Parameters
    ----------
    box_width, box_height : float
        Size of the observation region, centred on the atom.
    photon_speed : float
        Speed of every photon (units/s).
    max_light_photons : int
        Light photons allowed in the box at once; sets the emission pace.
    transition_wavelengths_weight : float
        Probability that white light picks a ground-state absorption line.
    min_wavelength, max_wavelength : int
        Range of the light source (nm).
    default_monochromatic_wavelength : int
        Initial monochromatic wavelength (nm).
    ground_orbit_radius : float
        Radius of the n = 1 orbit.
    collision_threshold : float
        Photon–electron collision distance.
    ring_thickness : float
        Extra tolerance for ring-shaped orbit collisions.
    absorption_probability : float
        Chance that a matching photon is absorbed by a quantized atom.
    stimulated_emission_probability : float
        Chance that a matching photon stimulates emission.
    min_time_in_state : float
        Dwell time before spontaneous emission is possible (s).
    state_lifetime : float
        Time scale of the growing spontaneous-emission hazard (s).
    electron_angular_speed : float
        Angular speed of the n = 1 Bohr electron (rad/s).
    standing_wave_angular_speed : float
        Oscillation rate of the de Broglie standing wave (rad/s).
    excite_atom_interval : float
        Interval between photons injected into a metastable atom (s).
    max_snapshots : int
        Maximum number of live spectrometer snapshots.
    """

    box_width: float = C.BOX_WIDTH
    box_height: float = C.BOX_HEIGHT
    photon_speed: float = C.PHOTON_SPEED
    max_light_photons: int = C.MAX_LIGHT_PHOTONS
    transition_wavelengths_weight: float = C.TRANSITION_WAVELENGTHS_WEIGHT
    min_wavelength: int = C.MIN_MONOCHROMATIC_WAVELENGTH
    max_wavelength: int = C.MAX_MONOCHROMATIC_WAVELENGTH
    default_monochromatic_wavelength: int = C.DEFAULT_MONOCHROMATIC_WAVELENGTH
    ground_orbit_radius: float = C.GROUND_ORBIT_RADIUS
    collision_threshold: float = C.COLLISION_THRESHOLD
    ring_thickness: float = C.RING_THICKNESS
    absorption_probability: float = C.ABSORPTION_PROBABILITY
    stimulated_emission_probability: float = C.STIMULATED_EMISSION_PROBABILITY
    min_time_in_state: float = C.MIN_TIME_IN_STATE
    state_lifetime: float = C.STATE_LIFETIME
    electron_angular_speed: float = C.ELECTRON_ANGULAR_SPEED
    standing_wave_angular_speed: float = C.STANDING_WAVE_ANGULAR_SPEED
    excite_atom_interval: float = C.EXCITE_ATOM_INTERVAL
    max_snapshots: int = C.MAX_SPECTROMETER_SNAPSHOTS

    def __post_init__(self) -> None:
        self.validate()

    # -- derived ------------------------------------------------------------

    @property
    def bounds(self) -> Bounds:
        return Bounds.centered(self.box_width, self.box_height)

    @property
    def photon_emission_interval(self) -> float:
        """Seconds between light photons: box height / speed / max photons."""
        return self.box_height / self.photon_speed / self.max_light_photons

    # -- construction -------------------------------------------------------

    def validate(self) -> None:
        """Check ranges and cross-field consistency

        Raises
        ------
        ConfigurationError
            On the first invalid field.
        """
        positive = (
            "box_width", "box_height", "photon_speed", "ground_orbit_radius",
            "collision_threshold", "state_lifetime", "excite_atom_interval",
        )
        for name in positive:
            if not getattr(self, name) > 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)!r}")

        for name in ("ring_thickness", "min_time_in_state",
                     "electron_angular_speed", "standing_wave_angular_speed"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {getattr(self, name)!r}")

        for name in ("transition_wavelengths_weight", "absorption_probability",
                     "stimulated_emission_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name}={value!r} is not a probability in [0, 1]")

        if self.max_light_photons < 1:
            raise ConfigurationError("max_light_photons must be at least 1")
        if self.max_snapshots < 0:
            raise ConfigurationError("max_snapshots must be non-negative")
        if not 0 < self.min_wavelength < self.max_wavelength:
            raise ConfigurationError(
                f"Invalid wavelength range [{self.min_wavelength}, {self.max_wavelength}]"
            )
        if not self.min_wavelength <= self.default_monochromatic_wavelength <= self.max_wavelength:
            raise ConfigurationError(
                f"default_monochromatic_wavelength={self.default_monochromatic_wavelength} "
                f"outside [{self.min_wavelength}, {self.max_wavelength}]"
            )

        outer = 36 * self.ground_orbit_radius
        if outer > min(self.box_width, self.box_height) / 2:
            raise ConfigurationError(
                f"n=6 orbit radius {outer} does not fit in a "
                f"{self.box_width}x{self.box_height} box"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> SimulationConfig:
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        config = cls(**values)
        logger.debug("Loaded configuration %s", config)
        return config

    def replace(self, **changes: Any) -> SimulationConfig:
        """Copy with *changes* applied (and validated)."""
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
