"""Molecular dynamics driver: reads the run settings, integrates and averages."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .atom import LJAtom
from .ensemble import NVEEnsemble
from .integrator import GearPC, Integrator

NVE_ENSEMBLE = 1
GEAR_PREDICTOR_CORRECTOR = 1
LENNARD_JONES = 1
GEAR_DERIVATIVES = 5

MD_FILE = "md.dat"
NVE_FILE = "NVEfileMD.dat"
LJ_FILE = "paramLJ.dat"

_SCALE_INTERVAL = 10


class _TokenReader:
    """Reads whitespace separated values from a parameter file in order."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self._path = Path(path)
        self._tokens = iter(self._path.read_text(encoding="utf-8").split())

    def _next(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError(f"{self._path}: missing value for {what}") from None

    def read_int(self, what: str) -> int:
        token = self._next(what)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"{self._path}: {what} must be an integer, got {token!r}") from None

    def read_float(self, what: str) -> float:
        token = self._next(what)
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"{self._path}: {what} must be a number, got {token!r}") from None


@dataclass
class MdParameters:
    """Run settings: step counts, time step and the chosen methods."""

    n_step: int
    n_equil: int
    n_size: int
    t_step: float
    integrator: int
    derivatives: int | None
    ensemble: int
    potential: int


@dataclass
class NveParameters:
    """State point and composition of a microcanonical run."""

    num_comp: int
    num_atom: int
    mol_fract: list[float]
    mass: list[float]
    temperature: float
    density: float


@dataclass
class NveResults:
    """Averages and error estimates of a microcanonical run (energies per atom)."""

    potential_energy: float
    potential_energy_error: float
    kinetic_energy: float
    kinetic_energy_error: float
    total_energy: float
    total_energy_error: float
    pressure: float
    pressure_error: float
    temperature: float
    temperature_error: float

    def format(self) -> str:
        """Return the results as the lines of the report file."""
        g = lambda x: format(x, "g")  # noqa: E731
        lines = [
            f"Potential Energy/N:\t{g(self.potential_energy)}  +/-  "
            f"{g(self.potential_energy_error)}",
            f"Kinetic Energy/N:\t {g(self.kinetic_energy)}  +/-  "
            f"{g(self.kinetic_energy_error)}",
            f"Total Energy/N:\t\t{g(self.total_energy)}  +/-  {g(self.total_energy_error)}",
            f"Pressure:\t\t {g(self.pressure)}  +/-  {g(self.pressure_error)}",
            f"Temperature:\t\t {g(self.temperature)}  +/-  {g(self.temperature_error)}",
        ]
        return "\n".join(lines) + "\n"


def read_md_parameters(path: str | PathLike[str]) -> MdParameters:
    """Read the run settings; the derivative count is present only for the Gear method."""
    reader = _TokenReader(path)
    n_step = reader.read_int("number of steps")
    n_equil = reader.read_int("equilibration steps")
    n_size = reader.read_int("block size")
    t_step = reader.read_float("time step")
    integrator = reader.read_int("integrator")
    derivatives = None
    if integrator == GEAR_PREDICTOR_CORRECTOR:
        derivatives = reader.read_int("derivatives")
    ensemble = reader.read_int("ensemble")
    potential = reader.read_int("potential")
    return MdParameters(
        n_step, n_equil, n_size, t_step, integrator, derivatives, ensemble, potential
    )


def read_nve_parameters(path: str | PathLike[str]) -> NveParameters:
    """Read the composition, masses, temperature and density of an NVE run."""
    reader = _TokenReader(path)
    num_comp = reader.read_int("number of components")
    if num_comp <= 0:
        raise ValueError("Number of components must be > 0")
    num_atom = reader.read_int("number of atoms")
    if num_atom < 4:
        raise ValueError("At least 4 atoms are required")
    mol_fract = [reader.read_float("mole fraction") for _ in range(num_comp)]
    mass = [reader.read_float("mass") for _ in range(num_comp)]
    temperature = reader.read_float("temperature")
    density = reader.read_float("density")
    return NveParameters(num_comp, num_atom, mol_fract, mass, temperature, density)


def read_lj_parameters(
    path: str | PathLike[str], num_comp: int
) -> tuple[list[list[float]], list[list[float]], list[list[float]]]:
    """Read epsilon, sigma and cut-off for every pair of components.

    Each entry is mirrored to its transposed pair, so the value read last for
    an unordered pair is the one kept.
    """
    reader = _TokenReader(path)
    epsilon = [[0.0] * num_comp for _ in range(num_comp)]
    sigma = [[0.0] * num_comp for _ in range(num_comp)]
    r_cut = [[0.0] * num_comp for _ in range(num_comp)]
    for i, j in itertools.product(range(num_comp), repeat=2):
        epsilon[i][j] = reader.read_float("epsilon")
        sigma[i][j] = reader.read_float("sigma")
        r_cut[i][j] = reader.read_float("cut-off")
        if i != j:
            epsilon[j][i] = epsilon[i][j]
            sigma[j][i] = sigma[i][j]
            r_cut[j][i] = r_cut[i][j]
    return epsilon, sigma, r_cut


def build_lj_atoms(
    nve: NveParameters,
    epsilon: list[list[float]],
    sigma: list[list[float]],
    r_cut: list[list[float]],
) -> list[LJAtom]:
    """Create the atoms of each component, in order of component type.

    Each component gets its rounded share of the atoms; the last one takes
    whatever is left.
    """
    counts = [0]
    for fraction in nve.mol_fract:
        number = nve.num_atom * fraction
        whole = int(number)
        counts.append(whole + 1 if number - whole >= 0.5 else whole)
    counts[-1] = max(counts[-1], nve.num_atom)
    bounds = list(itertools.accumulate(counts))

    atoms = []
    for kind in range(nve.num_comp):
        for _ in range(bounds[kind], min(bounds[kind + 1], nve.num_atom)):
            atoms.append(
                LJAtom(
                    atom_type=kind,
                    mass=nve.mass[kind],
                    r_cut=r_cut,
                    epsilon=epsilon,
                    sigma=sigma,
                )
            )
    return atoms


class MolecularDynamics:
    """A molecular dynamics run set up from the parameter files in a directory."""

    def __init__(self, data_dir: str | PathLike[str]) -> None:
        self.data_dir = Path(data_dir)
        self.params = read_md_parameters(self.data_dir / MD_FILE)

        if self.params.ensemble != NVE_ENSEMBLE:
            raise ValueError(f"unsupported ensemble {self.params.ensemble}")
        if self.params.potential != LENNARD_JONES:
            raise ValueError(f"unsupported intermolecular potential {self.params.potential}")

        self.nve = read_nve_parameters(self.data_dir / NVE_FILE)
        epsilon, sigma, r_cut = read_lj_parameters(self.data_dir / LJ_FILE, self.nve.num_comp)
        atoms = build_lj_atoms(self.nve, epsilon, sigma, r_cut)
        self.ensemble = NVEEnsemble(
            atoms, self.nve.temperature, self.nve.density, self.nve.mol_fract
        )

        if self.params.integrator != GEAR_PREDICTOR_CORRECTOR:
            raise ValueError(f"unsupported integrator {self.params.integrator}")
        if self.params.derivatives != GEAR_DERIVATIVES:
            raise ValueError(
                f"the Gear integrator needs {GEAR_DERIVATIVES} derivatives, "
                f"got {self.params.derivatives}"
            )
        self.integrator: Integrator = GearPC(self.ensemble.atoms)

    def run(self, output: str | PathLike[str]) -> NveResults:
        """Run the simulation for the configured ensemble and write the report."""
        return self.run_nve(output)

    def run_nve(self, output: str | PathLike[str]) -> NveResults:
        """Integrate in the NVE ensemble, write the report to ``output`` and return it."""
        p = self.params
        n_total = p.n_step - p.n_equil
        if n_total <= 0:
            raise ValueError("number of steps must exceed the equilibration period")
        if p.n_size <= 0:
            raise ValueError("block size must be positive")
        n_blocks = n_total // p.n_size

        ens = self.ensemble
        num = ens.num_atom

        with open(output, "w", encoding="utf-8") as out:
            ens.long_range_correction()
            lrc_e, lrc_w = ens.energy_lrc, ens.virial_lrc

            ens.compute_forces()
            ens.init_acceleration()
            ens.initial_velocity()
            ens.update_kinetic_energy()
            ens.scale_velocity()
            ens.update_kinetic_energy()

            # order: potential, kinetic, total, virial, temperature
            sums = [0.0] * 5
            blocks = [[0.0] * 5]
            for step in range(p.n_step):
                self.integrator.predict(ens.length, p.t_step)
                ens.compute_forces()
                ens.update_kinetic_energy(self.integrator.correct(ens.length, p.t_step))

                if step % _SCALE_INTERVAL == 0 and step < p.n_equil:
                    ens.scale_velocity()
                if step < p.n_equil:
                    continue

                pot = ens.potential_energy + lrc_e
                kin = ens.kinetic_energy
                vir = ens.virial + lrc_w
                sample = (pot, kin, pot + kin, vir, 2 * kin / (3 * num - 3))
                sums = [s + x for s, x in zip(sums, sample)]

                if step != p.n_equil and step % p.n_size == 0:
                    blocks[-1] = [b / p.n_size for b in blocks[-1]]
                    blocks.append([0.0] * 5)
                blocks[-1] = [b + x for b, x in zip(blocks[-1], sample)]

            averages = [s / n_total for s in sums]
            errors = [
                sum((block[k] - averages[k]) ** 2 for block in blocks[:n_blocks])
                for k in range(5)
            ]
            av_pot, av_kin, av_tot, av_vir, av_temp = averages
            er_pot, er_kin, er_tot, er_vir, er_temp = errors

            volume = ens.volume
            scale = n_total * num
            results = NveResults(
                potential_energy=av_pot / num,
                potential_energy_error=math.sqrt(er_pot) / scale,
                kinetic_energy=av_kin / num,
                kinetic_energy_error=math.sqrt(er_kin) / scale,
                total_energy=av_tot / num,
                total_energy_error=math.sqrt(er_tot) / scale,
                pressure=av_vir / volume + num * ens.temperature / volume,
                pressure_error=math.sqrt(er_vir / volume) / scale,
                temperature=av_temp,
                temperature_error=math.sqrt(er_temp) / n_total,
            )
            out.write(results.format())
        return results