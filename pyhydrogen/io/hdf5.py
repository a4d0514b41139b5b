#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of spectra and orbital density fields

HDF5 Layout
-----------
Spectrometer files::

    /metadata/
        package_version     string
        max_snapshots       int64
    /spectrum/
        wavelength          float64[]   units: nm
        count               int64[]     units: photons
    /snapshots/
        snapshot_{NNN}/                 attrs: number, model_kind, label, is_experiment
            wavelength      float64[]   units: nm
            count           int64[]     units: photons

Density files::

    /metadata/
        package_version     string
    /orbital/                           attrs: n, l, m, scale_length
        x                   float64[]   units: sim
        z                   float64[]   units: sim
        density             float64[z, x]

Physical units are stored as dataset attributes
(``ds.attrs["units"] = "nm"``).
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required for HDF5 export.  "
        "Install it with: pip install h5py"
    ) from _exc

from pyhydrogen.engine.spectrometer import Spectrometer
from pyhydrogen.exceptions import ExportError
from pyhydrogen.physics.wavefunction import probability_density_field
from pyhydrogen.utils.constants import GROUND_ORBIT_RADIUS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal writers
# ---------------------------------------------------------------------------

def _write_metadata(h5f: h5py.File) -> h5py.Group:
    from pyhydrogen import __version__

    meta = h5f.create_group("metadata")
    meta.create_dataset("package_version", data=__version__)
    return meta


def _create_dataset(
    group: h5py.Group,
    name: str,
    data: np.ndarray,
    units: str,
) -> h5py.Dataset:
    """Create a dataset with a ``units`` attribute

    Parameters
    ----------
    group : h5py.Group
        Parent group.
    name : str
        Dataset name.
    data : numpy.ndarray
        Data array; its dtype is kept.
    units : str
        Units string stored as ``ds.attrs["units"]``.
    """
    ds = group.create_dataset(name, data=np.asarray(data))
    ds.attrs["units"] = units
    return ds


def _write_counts(group: h5py.Group, wavelengths: np.ndarray, counts: np.ndarray) -> None:
    _create_dataset(group, "wavelength", wavelengths.astype("f8"), "nm")
    _create_dataset(group, "count", counts.astype("i8"), "photons")


def _write_spectrometer(h5f: h5py.File, spectrometer: Spectrometer) -> None:
    h5f["metadata"].create_dataset("max_snapshots", data=np.int64(spectrometer.max_snapshots))
    _write_counts(h5f.create_group("spectrum"), *spectrometer.as_arrays())

    snaps = h5f.create_group("snapshots")
    for snapshot in spectrometer.snapshots:
        grp = snaps.create_group(f"snapshot_{snapshot.number:03d}")
        grp.attrs["number"] = snapshot.number
        grp.attrs["model_kind"] = snapshot.model_kind.value
        grp.attrs["label"] = snapshot.label
        grp.attrs["is_experiment"] = snapshot.is_experiment
        _write_counts(grp, *snapshot.as_arrays())


def _open_for_write(path: Path | str, overwrite: bool) -> tuple[Path, str]:
    out = Path(path)
    if out.exists() and not overwrite:
        raise ExportError(f"Output file {out} already exists and overwrite=False.")
    out.parent.mkdir(parents=True, exist_ok=True)
    return out, ("w" if overwrite else "w-")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def write_spectrometer_hdf5(
    spectrometer: Spectrometer,
    output_path: Path | str,
    *,
    overwrite: bool = False,
) -> Path:
    """Write the current spectrum and all snapshots to an HDF5 file

    Parameters
    ----------
    spectrometer : Spectrometer
        Source of counts and snapshots.
    output_path : Path | str
        Target file; parent directories are created.
    overwrite : bool, optional
        Replace an existing file.  If ``False`` (default) an existing
        file raises :class:`~pyhydrogen.exceptions.ExportError`.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ExportError
        If the file exists and *overwrite* is ``False``, or on any
        HDF5 write failure.
    """
    out, mode = _open_for_write(output_path, overwrite)
    try:
        with h5py.File(str(out), mode) as h5f:
            _write_metadata(h5f)
            _write_spectrometer(h5f, spectrometer)
    except (OSError, ValueError, TypeError) as exc:
        raise ExportError(f"Failed to write HDF5 file {out}: {exc}") from exc

    logger.info("Wrote spectrum HDF5 file: %s", out)
    return out


def write_density_field_hdf5(
    n: int,
    l: int,
    m: int,
    output_path: Path | str,
    *,
    extent: float | None = None,
    resolution: int = 101,
    scale_length: float = GROUND_ORBIT_RADIUS,
    overwrite: bool = False,
) -> Path:
    """Sample the (n, l, m) probability density and write it to HDF5

    Parameters
    ----------
    n, l, m : int
        Quantum state.
    output_path : Path | str
        Target file.
    extent : float, optional
        Half-width of the sampled square; by default 1.5 times the
        n = 6 orbit radius.
    resolution : int, optional
        Samples per side.
    scale_length : float, optional
        Ground-state orbit radius used as the scale length.
    overwrite : bool, optional
        Replace an existing file.

    Raises
    ------
    ExportError
        If the file exists and *overwrite* is ``False``, or on any
        HDF5 write failure.
    """
    extent = 1.5 * 36 * scale_length if extent is None else extent
    xs, zs, field = probability_density_field(n, l, m, extent, resolution, scale_length)

    out, mode = _open_for_write(output_path, overwrite)
    try:
        with h5py.File(str(out), mode) as h5f:
            _write_metadata(h5f)
            grp = h5f.create_group("orbital")
            grp.attrs["n"] = n
            grp.attrs["l"] = l
            grp.attrs["m"] = m
            grp.attrs["scale_length"] = scale_length
            _create_dataset(grp, "x", xs, "sim")
            _create_dataset(grp, "z", zs, "sim")
            grp.create_dataset("density", data=field, compression="gzip")
    except (OSError, ValueError, TypeError) as exc:
        raise ExportError(f"Failed to write HDF5 file {out}: {exc}") from exc

    logger.info("Wrote density HDF5 file for (%d,%d,%d): %s", n, l, m, out)
    return out
