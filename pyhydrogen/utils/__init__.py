#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities: constants, geometry, observables and validation

Nothing here imports from PyHydrogen other than
:mod:`pyhydrogen.exceptions`, so every other layer can import from it.
"""

from __future__ import annotations
