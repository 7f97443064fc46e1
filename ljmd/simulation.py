"""Top level entry: choose the kind of simulation and run it."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path

from .md import MolecularDynamics, NveResults

SIM_FILE = "simMD.dat"
MOLECULAR_DYNAMICS = 1
MONTE_CARLO = 2


class SimulationError(ValueError):
    """The requested kind of simulation cannot be run."""


class Simulation:
    """Reads the simulation choice from a data directory and runs it."""

    OUTPUT_FILE = "md_nve.out"

    def __init__(self, data_dir: str | PathLike[str]) -> None:
        self.data_dir = Path(data_dir)
        self.output = Path(self.OUTPUT_FILE)
        self.md: MolecularDynamics | None = None

    def read_sim_parameters(self) -> NveResults:
        """Read the simulation kind and run it, returning its results."""
        path = self.data_dir / SIM_FILE
        tokens = path.read_text(encoding="utf-8").split()
        if not tokens:
            raise SimulationError(f"{path}: missing simulation kind")
        try:
            kind = int(tokens[0])
        except ValueError:
            raise SimulationError(f"{path}: invalid simulation kind {tokens[0]!r}") from None

        if kind == MOLECULAR_DYNAMICS:
            self.md = MolecularDynamics(self.data_dir)
            return self.md.run(self.output)
        if kind == MONTE_CARLO:
            raise SimulationError("Monte Carlo simulations are not available")
        raise SimulationError("Invalid simulation selected")


def main(argv: list[str] | None = None) -> int:
    """Run the simulation described by the data files of a directory."""
    parser = argparse.ArgumentParser(description="Lennard-Jones molecular dynamics.")
    parser.add_argument(
        "data_dir", nargs="?", default=".", help="directory holding the parameter files"
    )
    parser.add_argument(
        "-o", "--output", default=Simulation.OUTPUT_FILE, help="file receiving the results"
    )
    args = parser.parse_args(argv)

    sim = Simulation(args.data_dir)
    sim.output = Path(args.output)
    try:
        sim.read_sim_parameters()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f'Results were written to "{sim.output}"')
    return 0


if __name__ == "__main__":
    sys.exit(main())