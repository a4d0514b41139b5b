#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for photons and electrons
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from pyhydrogen.exceptions import InvariantError
from pyhydrogen.models.particles import (
    Electron,
    Neutron,
    Photon,
    Proton,
    QuantumElectron,
    SchrodingerElectron,
)
from pyhydrogen.models.records import QuantumNumbers
from pyhydrogen.utils.geometry import Bounds, nearest_point_on_ellipse
from pyhydrogen.utils.observable import Scope


class TestPhoton:
    """Test photon identity and motion."""

    def test_unique_ids(self) -> None:
        a = Photon(656, (0.0, 0.0), 0.0)
        b = Photon(656, (0.0, 0.0), 0.0)
        assert a.id != b.id

    def test_move(self) -> None:
        photon = Photon(656, (0.0, 0.0), math.pi / 2, speed=300.0)
        photon.move(0.1)
        np.testing.assert_allclose(photon.position, [0.0, 30.0], atol=1e-12)

    def test_flags_default(self) -> None:
        photon = Photon(122, (0.0, 0.0), 0.0)
        assert not photon.was_emitted_by_atom
        assert not photon.has_collided_with_atom

    def test_nonpositive_wavelength(self) -> None:
        with pytest.raises(InvariantError):
            Photon(0, (0.0, 0.0), 0.0)


class TestStationaryParticles:
    """Test the nucleus particles and geometry helpers."""

    def test_radii(self) -> None:
        assert Proton().radius == pytest.approx(7.5)
        assert Neutron().radius == pytest.approx(5.5)
        assert Electron().radius == pytest.approx(4.5)

    def test_stationary(self) -> None:
        proton = Proton((3.0, 4.0))
        proton.move(1.0)
        np.testing.assert_allclose(proton.position, [3.0, 4.0])

    def test_bounds(self) -> None:
        bounds = Bounds.centered(400, 300)
        assert (bounds.width, bounds.height) == (400, 300)
        assert (bounds.center_x, bounds.center_y) == (0, 0)
        assert bounds.contains(np.array([200.0, -150.0]))
        assert not bounds.contains(np.array([0.0, 151.0]))

    def test_nearest_point_on_circle(self) -> None:
        nearest = nearest_point_on_ellipse(10.0, 10.0, np.array([30.0, 40.0]))
        np.testing.assert_allclose(nearest, [6.0, 8.0], atol=1e-6)


class TestQuantumElectron:
    """Test the principal-number electron."""

    def test_ground_state(self) -> None:
        electron = QuantumElectron(5.0)
        assert electron.n.value == 1
        assert electron.energy == pytest.approx(-13.6)
        assert electron.orbit_radius == 5.0

    def test_transition_resets_dwell_time(self) -> None:
        electron = QuantumElectron()
        electron.time_in_state = 3.0
        electron.set_n(3)
        assert electron.time_in_state == 0.0

    def test_restoring_keeps_dwell_time(self) -> None:
        electron = QuantumElectron()
        electron.time_in_state = 3.0
        electron.set_n(3, restoring=True)
        assert electron.n.value == 3
        assert electron.time_in_state == 3.0

    def test_out_of_range(self) -> None:
        electron = QuantumElectron()
        with pytest.raises(InvariantError):
            electron.set_n(7)
        assert electron.n.value == 1

    def test_offset_follows_angle(self) -> None:
        electron = QuantumElectron(5.0)
        electron.set_n(2)
        electron.angle.set(math.pi / 2)
        np.testing.assert_allclose(electron.offset(), [0.0, 20.0], atol=1e-12)

    def test_angle_wraps(self) -> None:
        electron = QuantumElectron()
        electron.advance_angle(-0.5)
        assert 0.0 <= electron.angle.value < 2 * math.pi
        assert electron.angle.value == pytest.approx(2 * math.pi - 0.5)

    def test_scope_paths(self) -> None:
        scope = Scope("atom")
        QuantumElectron(scope=scope)
        assert sorted(scope) == ["atom.angle", "atom.n"]


class TestSchrodingerElectron:
    """Test the (n, l, m) electron."""

    def test_valid_transition(self) -> None:
        electron = SchrodingerElectron()
        electron.set_nlm(QuantumNumbers(2, 1, -1))
        assert electron.n.value == 2
        assert electron.nlm.value == QuantumNumbers(2, 1, -1)

    def test_forbidden_transition(self) -> None:
        electron = SchrodingerElectron()
        with pytest.raises(InvariantError):
            electron.set_nlm(QuantumNumbers(2, 0, 0))
        assert electron.nlm.value == SchrodingerElectron.GROUND
        assert electron.n.value == 1

    def test_restoring_skips_selection_rules(self) -> None:
        electron = SchrodingerElectron()
        electron.set_nlm(QuantumNumbers(2, 0, 0), restoring=True)
        assert electron.nlm.value == QuantumNumbers(2, 0, 0)

    def test_restoring_still_checks_bounds(self) -> None:
        electron = SchrodingerElectron()
        with pytest.raises(InvariantError):
            electron.set_nlm(QuantumNumbers(2, 2, 0), restoring=True)

    def test_set_n_rejected(self) -> None:
        electron = SchrodingerElectron()
        with pytest.raises(TypeError):
            electron.set_n(2)

    def test_listeners_see_consistent_n(self) -> None:
        electron = SchrodingerElectron()
        seen = []
        electron.nlm.lazy_link(lambda new, old: seen.append((new.n, electron.n.value)))
        electron.set_nlm(QuantumNumbers(3, 1, 0))
        assert seen == [(3, 3)]

    def test_n_listeners_see_new_triple(self) -> None:
        electron = SchrodingerElectron()
        seen = []
        electron.n.lazy_link(lambda new, old: seen.append((new, old, electron.nlm.value)))
        electron.transition_to(QuantumNumbers(2, 1, 0))
        assert seen == [(2, 1, QuantumNumbers(2, 1, 0))]

    def test_restoring_notifies_with_consistent_state(self) -> None:
        electron = SchrodingerElectron()
        electron.set_nlm(QuantumNumbers(3, 2, 1), restoring=True)
        seen = []
        electron.n.lazy_link(lambda new, old: seen.append(electron.nlm.value.n == new))
        electron.reset()
        assert seen == [True]

    def test_reset(self) -> None:
        electron = SchrodingerElectron()
        electron.set_nlm(QuantumNumbers(4, 1, 1))
        electron.reset()
        assert electron.nlm.value == SchrodingerElectron.GROUND
        assert electron.n.value == 1
        assert electron.time_in_state == 0.0
