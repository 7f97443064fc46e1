# ljmd

Molecular dynamics of Lennard-Jones fluids and fluid mixtures in the
microcanonical (NVE) ensemble. Atoms start on a face-centred cubic lattice
inside a periodic cubic box, receive random unit-speed velocities with zero
total momentum that are then scaled to the requested temperature, and are
advanced with Gear's fifth-order predictor-corrector. During equilibration the
velocities are rescaled every 10 steps. Long-range corrections are added to
the energy and the virial, and block averages give error estimates for the
reported properties.

## Installation

```
pip install .
```

## Running a simulation

All input lives in one data directory holding four whitespace-separated text
files:

- `simMD.dat` – the kind of simulation: `1` for molecular dynamics.
- `md.dat` – number of steps, equilibration steps, block size, time step,
  integrator (`1` = Gear predictor-corrector, followed by the number of
  derivatives, which must be `5`), ensemble (`1` = NVE) and intermolecular
  potential (`1` = Lennard-Jones).
- `NVEfileMD.dat` – number of components, number of atoms (at least 4), the
  mole fraction of each component, the mass of each component, the
  temperature and the density.
- `paramLJ.dat` – epsilon, sigma and cut-off radius for each ordered pair of
  component types; each entry is mirrored to its transposed pair, so the one
  read last for a pair is kept.

Start the run with

```
ljmd path/to/data
```

The data directory defaults to the current directory. The averages of the
potential, kinetic and total energy per atom, the pressure and the
temperature, each with its error estimate, are written to `md_nve.out` in the
current directory, or to the file given with `-o`/`--output`:

```
ljmd path/to/data --output results.out
```

On a missing or malformed file, or an unsupported choice, the command prints
an error and exits with status 1.

## Using the library

```python
from ljmd.md import MolecularDynamics

md = MolecularDynamics("path/to/data")
results = md.run("md_nve.out")
print(results.pressure, results.temperature)
```

`run` writes the report and returns an `NveResults`, whose `format()` gives
the report text. `ljmd.simulation.Simulation` reads `simMD.dat` first and
dispatches on it.

The building blocks are available on their own:

- `ljmd.atom` – `Atom` and `LJAtom` dataclasses holding position, velocity,
  acceleration, higher time derivatives, force and pair parameters.
- `ljmd.force` – `LJForce`, the truncated Lennard-Jones force field with
  `compute(length)` and `long_range_correction(composition, volume)`.
- `ljmd.ensemble` – `NVEEnsemble`, holding box size, composition and
  energies.
- `ljmd.integrator` – `GearPC` and a velocity-Verlet `Verlet`.
- `ljmd.auxfunc` – `nearest_int` and the `PressRandom` generator.
- `ljmd.md` – the parameter readers `read_md_parameters`,
  `read_nve_parameters`, `read_lj_parameters` and `build_lj_atoms`.

## Limitations

- Only molecular dynamics is available; choosing Monte Carlo (`2`) in
  `simMD.dat` is reported as an error.
- The driver supports only the NVE ensemble, the Lennard-Jones potential and
  the Gear integrator; `Verlet` can be used from code but not selected in
  `md.dat`.
- Forces are computed in a single process with an all-pairs loop; there is no
  parallel or distributed execution.

## Tests

```
pip install .[test]
pytest
```