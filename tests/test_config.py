#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for SimulationConfig validation
"""

from __future__ import annotations

import dataclasses

import pytest

from pyhydrogen.config import SimulationConfig
from pyhydrogen.exceptions import ConfigurationError


class TestSimulationConfig:
    """Test defaults, derived values and rejection of bad input."""

    def test_defaults(self, config: SimulationConfig) -> None:
        assert config.absorption_probability == 0.5
        assert config.max_snapshots == 3
        assert config.photon_emission_interval == pytest.approx(400 / 300 / 20)

    def test_bounds(self, config: SimulationConfig) -> None:
        b = config.bounds
        assert (b.min_x, b.min_y, b.max_x, b.max_y) == (-200, -200, 200, 200)

    def test_frozen(self, config: SimulationConfig) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.photon_speed = 1.0

    @pytest.mark.parametrize(
        "field,value",
        [
            ("absorption_probability", 1.5),
            ("stimulated_emission_probability", -0.1),
            ("photon_speed", 0.0),
            ("state_lifetime", 0.0),
            ("max_light_photons", 0),
            ("min_time_in_state", -1.0),
            ("default_monochromatic_wavelength", 50),
        ],
    )
    def test_invalid_field(self, field: str, value) -> None:
        with pytest.raises(ConfigurationError):
            SimulationConfig(**{field: value})

    def test_outer_orbit_must_fit(self) -> None:
        with pytest.raises(ConfigurationError):
            SimulationConfig(ground_orbit_radius=10.0)

    def test_from_mapping(self) -> None:
        config = SimulationConfig.from_mapping({"max_snapshots": 5})
        assert config.max_snapshots == 5

    def test_from_mapping_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="bogus"):
            SimulationConfig.from_mapping({"bogus": 1})

    def test_replace_validates(self, config: SimulationConfig) -> None:
        assert config.replace(absorption_probability=1.0).absorption_probability == 1.0
        with pytest.raises(ConfigurationError):
            config.replace(absorption_probability=2.0)

    def test_as_dict_round_trip(self, config: SimulationConfig) -> None:
        assert SimulationConfig.from_mapping(config.as_dict()) == config
