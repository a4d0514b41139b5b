#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of spectra and orbital density fields

Requires ``h5py``; see :mod:`pyhydrogen.io.hdf5`.
"""

from __future__ import annotations

from pyhydrogen.io.hdf5 import write_density_field_hdf5, write_spectrometer_hdf5

__all__ = ["write_spectrometer_hdf5", "write_density_field_hdf5"]
