#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the light source
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from pyhydrogen.config import SimulationConfig
from pyhydrogen.engine.light_source import LightMode, LightSource
from pyhydrogen.exceptions import ConfigurationError


@pytest.fixture
def light(config: SimulationConfig, rng: np.random.Generator) -> LightSource:
    """Light source collecting its own emissions in ``light.emitted``"""
    source = LightSource(config, rng)
    source.emitted = []
    source.photon_emitted.add_listener(source.emitted.append)
    return source


class TestPacing:
    """Test the time-based emission schedule."""

    def test_off_emits_nothing(self, light: LightSource) -> None:
        for _ in range(100):
            assert light.step(0.1) is None
        assert light.emitted == []

    def test_interval(self, light: LightSource) -> None:
        light.set_on()
        assert light.step(0.05) is None
        assert light.step(0.05) is not None
        assert light.step(0.03) is None

    def test_rate(self, light: LightSource) -> None:
        light.set_on()
        for _ in range(600):
            light.step(1 / 60)
        # 10 s at one photon every 1/15 s
        assert 149 <= len(light.emitted) <= 150

    def test_large_step_emits_one(self, light: LightSource) -> None:
        light.set_on()
        light.step(5.0)
        assert len(light.emitted) == 1

    def test_toggle_restarts_accumulator(self, light: LightSource) -> None:
        light.set_on()
        light.step(0.06)
        light.set_on(False)
        light.set_on(True)
        assert light.step(0.01) is None


class TestWavelengths:
    """Test white and monochromatic wavelength selection."""

    def test_white_range_and_bias(self, light: LightSource, table) -> None:
        lines = set(table.absorption_wavelengths(1))
        draws = [light.next_wavelength() for _ in range(4000)]
        assert all(isinstance(w, int) for w in draws)
        assert all(92 <= w <= 780 for w in draws)
        fraction = sum(w in lines for w in draws) / len(draws)
        assert fraction == pytest.approx(0.4 + 0.6 * 5 / 689, abs=0.04)

    def test_monochromatic(self, light: LightSource) -> None:
        light.set_mode(LightMode.MONOCHROMATIC)
        light.set_wavelength(656)
        light.set_on()
        for _ in range(300):
            light.step(1 / 60)
        assert light.emitted
        assert {p.wavelength for p in light.emitted} == {656}
        assert light.wavelength == 656

    def test_white_reports_zero(self, light: LightSource) -> None:
        assert light.wavelength == 0

    def test_mode_from_string(self, light: LightSource) -> None:
        light.set_mode("monochromatic")
        assert light.mode.value is LightMode.MONOCHROMATIC

    @pytest.mark.parametrize("wavelength", [50, 781])
    def test_out_of_range(self, light: LightSource, wavelength: int) -> None:
        with pytest.raises(ConfigurationError):
            light.set_wavelength(wavelength)


class TestPhotonPlacement:
    """Test where photons start and where they go."""

    def test_bottom_edge_upwards(self, light: LightSource) -> None:
        light.set_on()
        for _ in range(600):
            light.step(1 / 60)
        for photon in light.emitted:
            x, y = photon.position
            assert -200.0 <= x <= 200.0
            assert y == -200.0
            assert photon.direction == pytest.approx(math.pi / 2)
            assert not photon.was_emitted_by_atom

    def test_bottom_center_while_off(self, light: LightSource) -> None:
        photon = light.emit_photon_at_bottom_center(656)
        np.testing.assert_allclose(photon.position, [0.0, -200.0])
        assert light.emitted == [photon]

    def test_reset(self, light: LightSource) -> None:
        light.set_on()
        light.set_mode(LightMode.MONOCHROMATIC)
        light.set_wavelength(122)
        light.reset()
        assert not light.is_on.value
        assert light.mode.value is LightMode.WHITE
        assert light.monochromatic_wavelength.value == 380
