#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyHydrogen command-line interface

Provides three commands:

1. **table**   — Print the hydrogen transition table
2. **run**     — Run a headless simulation and print the emission spectrum
3. **density** — Export an orbital probability-density field to HDF5

Usage
-----
::

    # Lines and strengths
    python -m pyhydrogen.cli table

    # Ten simulated seconds of white light on the experiment atom
    python -m pyhydrogen.cli run --duration 10 --seed 42

    # Bohr model under Lyman-alpha light, spectrum saved to HDF5
    python -m pyhydrogen.cli run --mode prediction --model bohr \\
        --light monochromatic --wavelength 122 --export bohr.h5

    # (3, 2, 1) orbital on a 201 x 201 grid
    python -m pyhydrogen.cli density 3 2 1 orbital.h5 --resolution 201
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pyhydrogen.config import SimulationConfig
from pyhydrogen.exceptions import PyHydrogenError
from pyhydrogen.models.records import AtomicModelKind
from pyhydrogen.physics.orbits import energy
from pyhydrogen.physics.transitions import get_transition_table
from pyhydrogen.utils.constants import FRAME_DT

logger = logging.getLogger("pyhydrogen.cli")

SERIES_NAMES = {1: "Lyman", 2: "Balmer", 3: "Paschen", 4: "Brackett", 5: "Pfund"}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_table(args):
    """Print every transition with its wavelength, energy and strength."""
    table = get_transition_table()
    print(f"{'series':<9s} {'n1':>3s} {'n2':>3s} {'nm':>6s} {'eV':>8s} {'strength':>9s}")
    for t in table.transitions():
        gap = energy(t.upper) - energy(t.lower)
        strength = table.transition_strength(t.upper, t.lower)
        print(
            f"{SERIES_NAMES[t.lower]:<9s} {t.lower:3d} {t.upper:3d} "
            f"{t.wavelength:6d} {gap:8.3f} {strength:9.2f}"
        )
    return 0


def cmd_run(args):
    """Step a headless simulation and report the spectrum."""
    from pyhydrogen.engine.simulation import HydrogenAtomSimulation

    overrides = {}
    if args.absorption_probability is not None:
        overrides["absorption_probability"] = args.absorption_probability
    config = SimulationConfig(**overrides)

    sim = HydrogenAtomSimulation(config, seed=args.seed)
    sim.set_model_mode(args.mode)
    sim.select_model(args.model)
    sim.light.set_mode(args.light)
    if args.wavelength is not None:
        sim.light.set_wavelength(args.wavelength)
    sim.light.set_on(True)

    steps = int(round(args.duration / args.dt))
    logger.info(
        "Running %s for %.1f s (%d steps, light=%s)",
        sim.atom.label, args.duration, steps, args.light,
    )
    for _ in range(steps):
        sim.step(args.dt)

    points = sim.spectrometer.data_points()
    if not points:
        print("No photons emitted")
    for p in points:
        print(f"  {p.wavelength:>7g} nm  {p.count:6d}")

    if args.export:
        from pyhydrogen.io.hdf5 import write_spectrometer_hdf5

        sim.take_snapshot()
        write_spectrometer_hdf5(sim.spectrometer, args.export, overwrite=args.overwrite)
        print(f"Spectrum written to {args.export}")
    return 0


def cmd_density(args):
    """Export the probability-density field of one orbital."""
    from pyhydrogen.io.hdf5 import write_density_field_hdf5

    write_density_field_hdf5(
        args.n, args.l, args.m, args.output,
        extent=args.extent,
        resolution=args.resolution,
        overwrite=args.overwrite,
    )
    print(f"Density field ({args.n},{args.l},{args.m}) written to {args.output}")
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyhydrogen",
        description="Simulate light interacting with models of the hydrogen atom.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", help="Command to run")

    sub.add_parser("table", help="Print the transition table")

    run = sub.add_parser("run", help="Run a headless simulation")
    run.add_argument(
        "--mode",
        choices=["experiment", "prediction"],
        default="experiment",
        help="Use the experiment atom or a predictive model (default: experiment)",
    )
    run.add_argument(
        "--model",
        choices=[k.value for k in AtomicModelKind],
        default=AtomicModelKind.BOHR.value,
        help="Predictive model used in prediction mode (default: bohr)",
    )
    run.add_argument(
        "--light",
        choices=["white", "monochromatic"],
        default="white",
        help="Light mode (default: white)",
    )
    run.add_argument("--wavelength", type=int, help="Monochromatic wavelength in nm")
    run.add_argument("--duration", type=float, default=10.0, help="Simulated seconds (default: 10)")
    run.add_argument("--dt", type=float, default=FRAME_DT, help="Step size in seconds (default: 1/60)")
    run.add_argument("--seed", type=int, help="Random seed for a reproducible run")
    run.add_argument("--absorption-probability", type=float, help="Override absorption probability")
    run.add_argument("--export", help="Write the spectrum to this HDF5 file")
    run.add_argument("--overwrite", action="store_true", help="Overwrite existing output")

    dens = sub.add_parser("density", help="Export an orbital density field")
    dens.add_argument("n", type=int)
    dens.add_argument("l", type=int)
    dens.add_argument("m", type=int)
    dens.add_argument("output", help="Target HDF5 file")
    dens.add_argument("--extent", type=float, help="Half-width of the sampled square")
    dens.add_argument("--resolution", type=int, default=101, help="Samples per side (default: 101)")
    dens.add_argument("--overwrite", action="store_true", help="Overwrite existing output")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "run" and args.dt <= 0:
        parser.error("--dt must be positive")

    commands = {
        "table": cmd_table,
        "run": cmd_run,
        "density": cmd_density,
    }

    t0 = time.time()
    try:
        rc = commands[args.command](args)
    except (PyHydrogenError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return 1
    logger.debug("Completed in %.1fs", time.time() - t0)
    return rc


if __name__ == "__main__":
    sys.exit(main())
