#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the HDF5 writers

Covers the spectrometer layout (current spectrum plus snapshots) and the
orbital density-field layout.
"""

from __future__ import annotations

import numpy as np
import pytest

try:
    import h5py
except ImportError:
    pytest.skip("h5py not installed", allow_module_level=True)

from pyhydrogen import __version__
from pyhydrogen.engine.spectrometer import Spectrometer
from pyhydrogen.exceptions import ExportError, InvariantError
from pyhydrogen.io.hdf5 import write_density_field_hdf5, write_spectrometer_hdf5
from pyhydrogen.models.records import AtomicModelKind


@pytest.fixture
def spectrometer() -> Spectrometer:
    """Spectrometer with counts and two snapshots"""
    s = Spectrometer()
    for w in (122, 122, 656):
        s.record_emission(w)
    s.take_snapshot(AtomicModelKind.BOHR)
    s.record_emission(486)
    s.take_snapshot(AtomicModelKind.SCHRODINGER, "Experiment", is_experiment=True)
    return s


# -----------------------------------------------------------------------
# Spectrometer files
# -----------------------------------------------------------------------

class TestSpectrometerHDF5:
    """Test the spectrum file layout."""

    def test_creates_file(self, tmp_path, spectrometer) -> None:
        out = write_spectrometer_hdf5(spectrometer, tmp_path / "spectrum.h5")
        assert out.exists()

    def test_metadata(self, tmp_path, spectrometer) -> None:
        out = write_spectrometer_hdf5(spectrometer, tmp_path / "spectrum.h5")
        with h5py.File(str(out), "r") as h5f:
            assert h5f["metadata/package_version"].asstr()[()] == __version__
            assert int(h5f["metadata/max_snapshots"][()]) == 3

    def test_spectrum(self, tmp_path, spectrometer) -> None:
        out = write_spectrometer_hdf5(spectrometer, tmp_path / "spectrum.h5")
        with h5py.File(str(out), "r") as h5f:
            np.testing.assert_array_equal(h5f["spectrum/wavelength"][()], [122, 486, 656])
            np.testing.assert_array_equal(h5f["spectrum/count"][()], [2, 1, 1])
            assert h5f["spectrum/wavelength"].attrs["units"] == "nm"

    def test_snapshots(self, tmp_path, spectrometer) -> None:
        out = write_spectrometer_hdf5(spectrometer, tmp_path / "spectrum.h5")
        with h5py.File(str(out), "r") as h5f:
            assert sorted(h5f["snapshots"]) == ["snapshot_001", "snapshot_002"]
            first = h5f["snapshots/snapshot_001"]
            assert first.attrs["model_kind"] == "bohr"
            assert not bool(first.attrs["is_experiment"])
            np.testing.assert_array_equal(first["count"][()], [2, 1])
            second = h5f["snapshots/snapshot_002"]
            assert second.attrs["label"] == "Experiment"
            assert int(second.attrs["number"]) == 2
            assert bool(second.attrs["is_experiment"])

    def test_no_overwrite(self, tmp_path, spectrometer) -> None:
        out = tmp_path / "spectrum.h5"
        write_spectrometer_hdf5(spectrometer, out)
        with pytest.raises(ExportError):
            write_spectrometer_hdf5(spectrometer, out)
        write_spectrometer_hdf5(spectrometer, out, overwrite=True)

    def test_creates_parent_directories(self, tmp_path, spectrometer) -> None:
        out = write_spectrometer_hdf5(spectrometer, tmp_path / "a" / "b" / "s.h5")
        assert out.exists()


# -----------------------------------------------------------------------
# Density files
# -----------------------------------------------------------------------

class TestDensityHDF5:
    """Test the orbital density file layout."""

    def test_layout(self, tmp_path) -> None:
        out = write_density_field_hdf5(3, 2, 1, tmp_path / "orbital.h5", resolution=21)
        with h5py.File(str(out), "r") as h5f:
            grp = h5f["orbital"]
            assert (int(grp.attrs["n"]), int(grp.attrs["l"]), int(grp.attrs["m"])) == (3, 2, 1)
            assert grp["x"].shape == (21,)
            assert grp["z"].shape == (21,)
            assert grp["density"].shape == (21, 21)
            assert grp["x"].attrs["units"] == "sim"
            assert np.all(grp["density"][()] >= 0)

    def test_default_extent(self, tmp_path) -> None:
        out = write_density_field_hdf5(1, 0, 0, tmp_path / "orbital.h5", resolution=5)
        with h5py.File(str(out), "r") as h5f:
            assert float(h5f["orbital/x"][-1]) == pytest.approx(1.5 * 36 * 5.0)

    def test_invalid_state(self, tmp_path) -> None:
        with pytest.raises(InvariantError):
            write_density_field_hdf5(2, 2, 0, tmp_path / "orbital.h5")
        assert not (tmp_path / "orbital.h5").exists()
