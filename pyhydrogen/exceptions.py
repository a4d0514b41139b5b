#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyHydrogen package

All exceptions raised by PyHydrogen inherit from :class:`PyHydrogenError`,
making it possible to catch every library-specific error with a single
``except`` clause while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyHydrogenError
    ├── InvariantError       # Physics contract broken (fail fast)
    ├── ConfigurationError   # Invalid settings or user command
    ├── SnapshotLimitError   # Spectrometer snapshot store is full
    └── ExportError          # HDF5 write failures

Expected outcomes such as "no lower state is reachable" are *not*
exceptions; those are reported as ``None`` return values.
"""

from __future__ import annotations


class PyHydrogenError(Exception):
    """Base exception for all PyHydrogen errors

    Every exception raised by PyHydrogen is a subclass of this type.
    Catching ``PyHydrogenError`` therefore catches any library-specific
    failure while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class InvariantError(PyHydrogenError):
    """Raised when the simulation reaches a physically illegal state

    Examples are a principal quantum number outside ``[1, 6]``, an
    ``(n, l, m)`` triple violating ``0 <= l < n`` or ``|m| <= l``, a
    standing-wave amplitude outside ``[-1, 1]``, or a Schrödinger
    transition that breaks the dipole selection rules.  These are
    programming-contract failures: once one is raised the simulation
    must be considered to be in an undefined state.

    Parameters
    ----------
    message : str
        Description of the violated constraint, including the offending
        value.
    """


class ConfigurationError(PyHydrogenError):
    """Raised when a configuration value or user command is out of range

    This covers invalid :class:`~pyhydrogen.config.SimulationConfig`
    fields, unknown keys passed to
    :meth:`~pyhydrogen.config.SimulationConfig.from_mapping`, and
    monochromatic wavelengths outside the supported range.

    Parameters
    ----------
    message : str
        Description of the rejected setting and its allowed range.
    """


class SnapshotLimitError(PyHydrogenError):
    """Raised when a spectrometer snapshot is requested at the maximum

    The spectrometer never evicts existing snapshots to make room; one
    must be deleted explicitly before another can be taken.

    Parameters
    ----------
    message : str
        Description including the configured maximum.
    """


class ExportError(PyHydrogenError):
    """Raised when HDF5 export fails

    This covers any error during HDF5 file creation: permission denied,
    disk full, or a target file that already exists when ``overwrite``
    is ``False``.

    Parameters
    ----------
    message : str
        Description of the export failure and the target HDF5 path.
    """
