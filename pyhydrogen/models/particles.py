#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Particle primitives: photons, protons, neutrons and electron variants

Particles are plain state holders.  Their observable fields (quantum
numbers, orbital angle, etc.) are :class:`~pyhydrogen.utils.observable.Property`
instances so a presentation layer can follow them; everything else is an
ordinary attribute.

Hierarchy
---------
::

    Particle
    ├── Photon
    ├── Proton
    ├── Neutron
    └── Electron
        ├── PlumPuddingElectron
        ├── ClassicalSolarSystemElectron
        └── QuantumElectron
            └── SchrodingerElectron
"""

from __future__ import annotations

import enum
import itertools
import logging

import numpy as np

from pyhydrogen.models.records import QuantumNumbers
from pyhydrogen.utils.constants import (
    CLASSICAL_ANGULAR_SPEED,
    ELECTRON_DIAMETER,
    GROUND_ORBIT_RADIUS,
    GROUND_STATE,
    GROUND_STATE_ENERGY,
    NEUTRON_DIAMETER,
    ORBIT_START_DISTANCE,
    PHOTON_DIAMETER,
    PHOTON_SPEED,
    PROTON_DIAMETER,
)
from pyhydrogen.utils.geometry import as_point, normalize_angle, polar_to_cartesian
from pyhydrogen.utils.observable import Property, Scope
from pyhydrogen.utils.validation import (
    validate_n,
    validate_nlm,
    validate_transition,
    validate_wavelength,
)

logger = logging.getLogger(__name__)

_photon_ids = itertools.count(1)


class Particle:
    """A point-like body with a position, radius and straight-line motion

    Parameters
    ----------
    position : array-like, optional
        Initial position, default origin.
    radius : float, optional
        Collision radius.
    direction : float, optional
        Direction of motion (radians).
    speed : float, optional
        Speed (units/s); zero for stationary particles.
    """

    def __init__(
        self,
        position: np.ndarray | tuple[float, float] = (0.0, 0.0),
        radius: float = 0.0,
        direction: float = 0.0,
        speed: float = 0.0,
    ) -> None:
        self.position = as_point(position[0], position[1])
        self.radius = radius
        self.direction = direction
        self.speed = speed

    def move(self, dt: float) -> None:
        """Advance the position by ``speed · dt`` along ``direction``."""
        if self.speed:
            self.position = self.position + polar_to_cartesian(self.speed * dt, self.direction)


class Photon(Particle):
    """A photon travelling in a straight line

    Parameters
    ----------
    wavelength : float
        Wavelength in nm.
    position : array-like
        Emission point.
    direction : float
        Direction of travel (radians).
    speed : float, optional
        Speed (units/s).
    was_emitted_by_atom : bool, optional
        ``True`` for photons emitted by an atom; those are never
        absorbed and are counted by the spectrometer when they leave.

    Attributes
    ----------
    id : int
        Process-unique identity used to key the photon pool.
    has_collided_with_atom : bool
        Set once the photon has been offered to the atom, so each photon
        gets at most one absorption or stimulation attempt.
    """

    def __init__(
        self,
        wavelength: float,
        position: np.ndarray | tuple[float, float],
        direction: float,
        speed: float = PHOTON_SPEED,
        *,
        was_emitted_by_atom: bool = False,
    ) -> None:
        validate_wavelength(wavelength)
        super().__init__(position, PHOTON_DIAMETER / 2, direction, speed)
        self.id = next(_photon_ids)
        self.wavelength = wavelength
        self.was_emitted_by_atom = was_emitted_by_atom
        self.has_collided_with_atom = False

    def __repr__(self) -> str:
        x, y = self.position
        return (
            f"Photon(id={self.id}, wavelength={self.wavelength}, "
            f"position=({x:.1f}, {y:.1f}), direction={self.direction:.3f})"
        )


class Proton(Particle):
    def __init__(self, position: np.ndarray | tuple[float, float] = (0.0, 0.0)) -> None:
        super().__init__(position, PROTON_DIAMETER / 2)


class Neutron(Particle):
    def __init__(self, position: np.ndarray | tuple[float, float] = (0.0, 0.0)) -> None:
        super().__init__(position, NEUTRON_DIAMETER / 2)


class Electron(Particle):
    def __init__(self, position: np.ndarray | tuple[float, float] = (0.0, 0.0)) -> None:
        super().__init__(position, ELECTRON_DIAMETER / 2)


# ---------------------------------------------------------------------------
# Classical electrons
# ---------------------------------------------------------------------------

class OscillationDirection(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


class PlumPuddingElectron(Electron):
    """Electron embedded in the plum pudding

    It rests at the pudding centre until it absorbs a photon, then
    oscillates horizontally along a line through the centre.
    """

    def __init__(self, scope: Scope | None = None) -> None:
        super().__init__()
        self.is_moving = Property(False, "isMoving", scope)
        self.oscillation_direction = Property(
            OscillationDirection.RIGHT, "direction", scope
        )

    def reset(self) -> None:
        self.position = as_point(0.0, 0.0)
        self.is_moving.reset()
        self.oscillation_direction.reset()


class ClassicalSolarSystemElectron(Electron):
    """Electron on a decaying classical orbit

    Parameters
    ----------
    start_angle : float
        Initial orbital angle (radians); the model supplies a random one.
    scope : Scope, optional
        Naming scope for the observable fields.
    """

    def __init__(self, start_angle: float, scope: Scope | None = None) -> None:
        super().__init__(polar_to_cartesian(ORBIT_START_DISTANCE, start_angle))
        self.start_angle = normalize_angle(start_angle)
        self.orbit_distance = Property(ORBIT_START_DISTANCE, "distance", scope)
        self.orbit_angle = Property(self.start_angle, "angle", scope)
        self.angular_speed = CLASSICAL_ANGULAR_SPEED

    def reset(self, start_angle: float | None = None) -> None:
        """Return to the starting orbit

        Parameters
        ----------
        start_angle : float, optional
            New starting angle (radians); the current one is kept if omitted.
        """
        if start_angle is not None:
            self.start_angle = normalize_angle(start_angle)
        self.orbit_distance.reset()
        self.orbit_angle.set(self.start_angle)
        self.angular_speed = CLASSICAL_ANGULAR_SPEED
        self.position = polar_to_cartesian(ORBIT_START_DISTANCE, self.start_angle)

    @property
    def has_collapsed(self) -> bool:
        return self.orbit_distance.value == 0.0


# ---------------------------------------------------------------------------
# Quantum electrons
# ---------------------------------------------------------------------------

class QuantumElectron(Electron):
    """Electron with a principal quantum number

    Parameters
    ----------
    ground_orbit_radius : float, optional
        Radius of the n = 1 orbit.
    scope : Scope, optional
        Naming scope for ``n`` and ``angle``.

    Attributes
    ----------
    n : Property[int]
        Principal quantum number, 1 ≤ n ≤ 6.
    angle : Property[float]
        Orbital angle in [0, 2π).
    time_in_state : float
        Seconds since ``n`` last changed.
    """

    def __init__(
        self,
        ground_orbit_radius: float = GROUND_ORBIT_RADIUS,
        scope: Scope | None = None,
    ) -> None:
        super().__init__()
        self.ground_orbit_radius = ground_orbit_radius
        self.n = Property(GROUND_STATE, "n", scope, validator=validate_n)
        self.angle = Property(0.0, "angle", scope)
        self.time_in_state = 0.0

    @property
    def state(self) -> int:
        """The full quantum state; for this electron just ``n``."""
        return self.n.value

    @property
    def energy(self) -> float:
        """E(n) = E₁ / n² in eV."""
        return GROUND_STATE_ENERGY / self.n.value ** 2

    @property
    def orbit_radius(self) -> float:
        return self.n.value ** 2 * self.ground_orbit_radius

    def offset(self) -> np.ndarray:
        """Position relative to the atom centre."""
        return polar_to_cartesian(self.orbit_radius, self.angle.value)

    def set_n(self, n: int, *, restoring: bool = False) -> None:
        """Change the principal quantum number

        Parameters
        ----------
        n : int
            New principal quantum number.
        restoring : bool, optional
            ``True`` while state is being restored (reset or load); the
            dwell timer is then left alone.
        """
        old = self.n.value
        self.n.set(n)
        if n != old and not restoring:
            self.time_in_state = 0.0
            logger.debug("n: %d -> %d", old, n)

    def transition_to(self, state: int, *, restoring: bool = False) -> None:
        self.set_n(state, restoring=restoring)

    def advance_angle(self, delta: float) -> None:
        self.angle.set(normalize_angle(self.angle.value + delta))

    def reset(self) -> None:
        self.set_n(GROUND_STATE, restoring=True)
        self.angle.reset()
        self.time_in_state = 0.0


class SchrodingerElectron(QuantumElectron):
    """Quantum electron with the full (n, l, m) state

    ``n`` is kept in step with ``nlm``; both change atomically through
    :meth:`set_nlm`.  Outside of restoration every change must obey the
    dipole selection rules.
    """

    GROUND = QuantumNumbers(GROUND_STATE, 0, 0)

    def __init__(
        self,
        ground_orbit_radius: float = GROUND_ORBIT_RADIUS,
        scope: Scope | None = None,
    ) -> None:
        super().__init__(ground_orbit_radius, scope)
        self.nlm = Property(
            self.GROUND, "nlm", scope, validator=lambda q: validate_nlm(*q.as_tuple())
        )

    @property
    def state(self) -> QuantumNumbers:
        return self.nlm.value

    def set_nlm(self, nlm: QuantumNumbers, *, restoring: bool = False) -> None:
        """Replace the whole (n, l, m) triple

        Parameters
        ----------
        nlm : QuantumNumbers
            New state.
        restoring : bool, optional
            ``True`` while state is being restored; skips the
            selection-rule check and leaves the dwell timer alone.

        Raises
        ------
        InvariantError
            If *nlm* is illegal, or if the transition breaks the
            selection rules and *restoring* is ``False``.
        """
        old = self.nlm.value
        if nlm == old:
            return
        if restoring:
            validate_nlm(*nlm.as_tuple())
        else:
            validate_transition(old.as_tuple(), nlm.as_tuple())
        # both fields are stored before any listener runs
        self.nlm.store(nlm)
        old_n = self.n.store(nlm.n)
        if not restoring:
            self.time_in_state = 0.0
        logger.debug("(n,l,m): %s -> %s", old, nlm)
        self.n.notify(old_n)
        self.nlm.notify(old)

    def set_n(self, n: int, *, restoring: bool = False) -> None:
        raise TypeError("SchrodingerElectron state must be changed with set_nlm()")

    def transition_to(self, state: QuantumNumbers, *, restoring: bool = False) -> None:
        self.set_nlm(state, restoring=restoring)

    def reset(self) -> None:
        self.set_nlm(self.GROUND, restoring=True)
        self.angle.reset()
        self.time_in_state = 0.0

