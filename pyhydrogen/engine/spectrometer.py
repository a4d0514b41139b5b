#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Spectrometer: histogram of photons emitted by the atom

Counts are keyed by wavelength and only grow while ``recording`` is on.
Snapshots are immutable copies numbered 1, 2, 3, …; the number of live
snapshots is bounded and a full spectrometer refuses new ones rather
than evicting old ones.

Examples
--------
>>> s = Spectrometer(max_snapshots=1)
>>> s.record_emission(656)
>>> s.take_snapshot(AtomicModelKind.BOHR).number
1
>>> s.can_take_snapshot
False
"""

from __future__ import annotations

import logging
from collections import Counter

import numpy as np

from pyhydrogen.exceptions import SnapshotLimitError
from pyhydrogen.models.records import (
    AtomicModelKind,
    SpectrometerDataPoint,
    SpectrometerSnapshot,
)
from pyhydrogen.utils.constants import MAX_SPECTROMETER_SNAPSHOTS
from pyhydrogen.utils.observable import Emitter, Property, Scope

logger = logging.getLogger(__name__)


class Spectrometer:
    """Accumulates emitted-photon wavelengths and keeps snapshots

    Parameters
    ----------
    max_snapshots : int, optional
        Maximum number of live snapshots.
    scope : Scope, optional
        Naming scope for ``recording``.

    Attributes
    ----------
    data_changed : Emitter
        Fired after every change to the counts.
    """

    def __init__(
        self,
        max_snapshots: int = MAX_SPECTROMETER_SNAPSHOTS,
        scope: Scope | None = None,
    ) -> None:
        self.max_snapshots = max_snapshots
        self.recording = Property(True, "recording", scope)
        self.data_changed = Emitter("dataChanged")
        self._counts: Counter[float] = Counter()
        self._snapshots: list[SpectrometerSnapshot] = []
        self._next_snapshot_number = 1

    # -- data -------------------------------------------------------------------

    def record_emission(self, wavelength: float) -> None:
        """Count one photon at *wavelength* if recording."""
        if not self.recording.value:
            return
        self._counts[wavelength] += 1
        self.data_changed.emit()

    def count(self, wavelength: float) -> int:
        return self._counts.get(wavelength, 0)

    @property
    def has_data(self) -> bool:
        return bool(self._counts)

    def data_points(self) -> tuple[SpectrometerDataPoint, ...]:
        """Counts sorted by wavelength."""
        return tuple(
            SpectrometerDataPoint(w, self._counts[w]) for w in sorted(self._counts)
        )

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(wavelengths, counts)`` as float64 / int64 arrays."""
        points = self.data_points()
        return (
            np.array([p.wavelength for p in points], dtype="f8"),
            np.array([p.count for p in points], dtype="i8"),
        )

    def clear(self) -> None:
        """Empty all counts; snapshots are kept."""
        self._counts.clear()
        self.data_changed.emit()

    # -- snapshots ------------------------------------------------------------

    @property
    def snapshots(self) -> tuple[SpectrometerSnapshot, ...]:
        return tuple(self._snapshots)

    @property
    def can_take_snapshot(self) -> bool:
        return len(self._snapshots) < self.max_snapshots

    def take_snapshot(
        self,
        model_kind: AtomicModelKind,
        label: str = "",
        is_experiment: bool = False,
    ) -> SpectrometerSnapshot:
        """Store a numbered copy of the current counts

        Raises
        ------
        SnapshotLimitError
            If ``max_snapshots`` snapshots already exist.
        """
        if not self.can_take_snapshot:
            raise SnapshotLimitError(
                f"Cannot take more than {self.max_snapshots} snapshots; delete one first"
            )
        snapshot = SpectrometerSnapshot(
            self._next_snapshot_number,
            model_kind,
            self.data_points(),
            label or model_kind.display_name,
            is_experiment,
        )
        self._next_snapshot_number += 1
        self._snapshots.append(snapshot)
        logger.debug("Took snapshot %d (%s)", snapshot.number, snapshot.label)
        return snapshot

    def delete_snapshot(self, snapshot: SpectrometerSnapshot) -> None:
        """Remove *snapshot*

        Raises
        ------
        ValueError
            If *snapshot* is not held by this spectrometer.
        """
        self._snapshots.remove(snapshot)
        logger.debug("Deleted snapshot %d", snapshot.number)

    def reset(self) -> None:
        """Clear counts and snapshots and restart numbering."""
        self._counts.clear()
        self._snapshots.clear()
        self._next_snapshot_number = 1
        self.recording.reset()
        self.data_changed.emit()
