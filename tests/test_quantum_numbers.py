#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the (n, l, m) selection rules and weighted choices
"""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from pyhydrogen.exceptions import InvariantError
from pyhydrogen.models.records import QuantumNumbers
from pyhydrogen.physics.quantum_numbers import (
    choose_lower_n,
    choose_successor,
    is_metastable,
    is_valid_transition,
    lower_n_candidates,
    stimulated_emission_allowed,
    successors,
)
from pyhydrogen.physics.sampling import choose_uniform, choose_weighted_value
from pyhydrogen.utils.validation import validate_nlm, validate_transition


def all_states():
    return [
        QuantumNumbers(n, l, m)
        for n in range(1, 7)
        for l in range(n)
        for m in range(-l, l + 1)
    ]


class TestSuccessors:
    """Test enumeration of reachable (l', m') for a target level."""

    def test_from_ground_to_two(self) -> None:
        assert successors(QuantumNumbers(1, 0, 0), 2) == [
            QuantumNumbers(2, 1, -1),
            QuantumNumbers(2, 1, 0),
            QuantumNumbers(2, 1, 1),
        ]

    def test_both_orbital_branches(self) -> None:
        assert successors(QuantumNumbers(3, 1, 0), 4) == [
            QuantumNumbers(4, 0, 0),
            QuantumNumbers(4, 2, -1),
            QuantumNumbers(4, 2, 0),
            QuantumNumbers(4, 2, 1),
        ]

    def test_metastable_cannot_reach_ground(self) -> None:
        assert successors(QuantumNumbers(2, 0, 0), 1) == []

    def test_p_state_reaches_ground(self) -> None:
        assert successors(QuantumNumbers(2, 1, 1), 1) == [QuantumNumbers(1, 0, 0)]

    def test_same_level_has_no_successors(self) -> None:
        assert successors(QuantumNumbers(3, 1, 0), 3) == []

    def test_out_of_range_level(self) -> None:
        assert successors(QuantumNumbers(6, 1, 0), 7) == []

    def test_every_successor_obeys_rules(self) -> None:
        for nlm in all_states():
            for n2 in range(1, 7):
                for nxt in successors(nlm, n2):
                    validate_nlm(*nxt.as_tuple())
                    validate_transition(nlm.as_tuple(), nxt.as_tuple())
                    assert is_valid_transition(nlm, nxt)

    def test_successors_are_complete(self) -> None:
        states = all_states()
        for old in states:
            for new in states:
                expected = is_valid_transition(old, new)
                assert (new in successors(old, new.n)) == expected

    def test_choose_successor_none(self, rng: np.random.Generator) -> None:
        assert choose_successor(rng, QuantumNumbers(2, 0, 0), 1) is None

    def test_choose_successor_uniform(self, rng: np.random.Generator) -> None:
        counts = Counter(
            choose_successor(rng, QuantumNumbers(1, 0, 0), 2) for _ in range(3000)
        )
        assert set(counts) == {QuantumNumbers(2, 1, m) for m in (-1, 0, 1)}
        for c in counts.values():
            assert 850 < c < 1150


class TestTransitionValidation:
    """Test the selection-rule validator."""

    @pytest.mark.parametrize(
        "old,new",
        [
            ((1, 0, 0), (2, 0, 0)),   # Δl = 0
            ((2, 1, 0), (2, 0, 0)),   # n unchanged
            ((3, 2, 2), (2, 1, 0)),   # Δm = 2
            ((1, 0, 0), (3, 2, 0)),   # Δl = 2
            ((1, 0, 0), (1, 1, 0)),   # l ≥ n
        ],
    )
    def test_forbidden(self, old, new) -> None:
        with pytest.raises(InvariantError):
            validate_transition(old, new)
        assert not is_valid_transition(QuantumNumbers(*old), QuantumNumbers(*new))

    def test_boolean_form_agrees_with_validator(self) -> None:
        states = all_states()
        for old in states:
            for new in states:
                try:
                    validate_transition(old.as_tuple(), new.as_tuple())
                    accepted = True
                except InvariantError:
                    accepted = False
                assert is_valid_transition(old, new) == accepted

    def test_metastable_state(self) -> None:
        assert is_metastable(QuantumNumbers(2, 0, 0))
        assert not is_metastable(QuantumNumbers(2, 1, 0))


class TestLowerLevelChoice:
    """Test the weighted choice of a spontaneous-emission target."""

    def test_candidates(self) -> None:
        assert list(lower_n_candidates(1, 0)) == []
        assert list(lower_n_candidates(2, 0)) == []
        assert list(lower_n_candidates(2, 1)) == [1]
        assert list(lower_n_candidates(4, 0)) == [2, 3]
        assert list(lower_n_candidates(5, 3)) == [3, 4]

    def test_ground_and_metastable(self, rng: np.random.Generator) -> None:
        assert choose_lower_n(rng, 1, 0) is None
        assert choose_lower_n(rng, 2, 0) is None

    def test_single_candidate(self, rng: np.random.Generator) -> None:
        assert choose_lower_n(rng, 2, 1) == 1
        assert choose_lower_n(rng, 3, 0) == 2
        assert choose_lower_n(rng, 3, 2) == 2

    def test_zero_strength(self, rng: np.random.Generator) -> None:
        # 6 -> 5 has strength 0
        assert choose_lower_n(rng, 6, 5) is None

    def test_weighted_by_strength(self, rng: np.random.Generator) -> None:
        draws = [choose_lower_n(rng, 3, 1) for _ in range(4000)]
        assert set(draws) == {1, 2}
        fraction = draws.count(1) / len(draws)
        assert fraction == pytest.approx(3.34 / (3.34 + 0.87), abs=0.04)

    def test_never_picks_zero_weight(self, rng: np.random.Generator) -> None:
        # 5 -> 4 and 6 -> 4 have zero strength
        for _ in range(500):
            assert choose_lower_n(rng, 6, 2) != 4


class TestStimulatedEmission:
    """Test which lower levels a photon can stimulate."""

    def test_ground_only_from_p(self) -> None:
        assert stimulated_emission_allowed(QuantumNumbers(2, 1, 0), 1)
        assert not stimulated_emission_allowed(QuantumNumbers(2, 0, 0), 1)
        assert not stimulated_emission_allowed(QuantumNumbers(3, 2, 1), 1)

    def test_upward_not_allowed(self) -> None:
        assert not stimulated_emission_allowed(QuantumNumbers(1, 0, 0), 2)


class TestSampling:
    """Test the random choice helpers."""

    def test_weighted_empty(self, rng: np.random.Generator) -> None:
        assert choose_weighted_value(rng, [], []) is None

    def test_weighted_all_zero(self, rng: np.random.Generator) -> None:
        assert choose_weighted_value(rng, [1, 2], [0.0, 0.0]) is None

    def test_weighted_length_mismatch(self, rng: np.random.Generator) -> None:
        with pytest.raises(ValueError):
            choose_weighted_value(rng, [1, 2], [1.0])

    def test_weighted_negative(self, rng: np.random.Generator) -> None:
        with pytest.raises(ValueError):
            choose_weighted_value(rng, [1, 2], [1.0, -1.0])

    def test_uniform_empty(self, rng: np.random.Generator) -> None:
        with pytest.raises(ValueError):
            choose_uniform(rng, [])

    def test_seeded_reproducible(self) -> None:
        a = np.random.default_rng(7)
        b = np.random.default_rng(7)
        values = ["x", "y", "z"]
        weights = [1.0, 2.0, 3.0]
        assert [choose_weighted_value(a, values, weights) for _ in range(50)] == [
            choose_weighted_value(b, values, weights) for _ in range(50)
        ]
