"""Statistical ensembles holding the atoms of a simulation box."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .atom import Atom, LJAtom
from .auxfunc import PressRandom, nearest_int
from .force import Force, LJForce

_VELOCITY_SEED = -29


def _composition(mol_fract: Sequence[float], num_atom: int) -> list[int]:
    """Split ``num_atom`` between the components; the last one takes the remainder."""
    counts = [int(fraction * num_atom) for fraction in mol_fract[:-1]]
    counts.append(num_atom - sum(counts))
    return counts


class Ensemble(ABC):
    """Physical state shared by all ensembles: box size, composition and energies."""

    def __init__(
        self,
        atoms: Sequence[Atom],
        temperature: float,
        density: float,
        mol_fract: Sequence[float],
    ) -> None:
        if not atoms:
            raise ValueError("at least one atom is required")
        if not mol_fract:
            raise ValueError("number of components must be > 0")
        if density <= 0:
            raise ValueError("density must be positive")

        self.atoms = list(atoms)
        self.temperature = float(temperature)
        self.density = float(density)
        self.mol_fract = [float(x) for x in mol_fract]

        self.volume = self.num_atom / self.density
        self.length = self.volume ** (1.0 / 3)
        self.composition = _composition(self.mol_fract, self.num_atom)

        self.kinetic_energy = 0.0
        self.potential_energy = 0.0
        self.virial = 0.0

    @property
    def num_atom(self) -> int:
        """Total number of atoms in the box."""
        return len(self.atoms)

    @property
    def num_comp(self) -> int:
        """Number of components."""
        return len(self.mol_fract)

    def init_acceleration(self) -> None:
        """Set every atom's acceleration from its current force."""
        for atom in self.atoms:
            atom.acceleration = [f / atom.mass for f in atom.force]

    @abstractmethod
    def initial_velocity(self) -> None:
        """Assign starting velocities."""

    @abstractmethod
    def initial_coord(self) -> None:
        """Place the atoms at their starting positions."""

    @abstractmethod
    def scale_velocity(self) -> None:
        """Rescale velocities to the target temperature."""

    @abstractmethod
    def compute_forces(self) -> None:
        """Evaluate the forces, potential energy and virial."""

    @abstractmethod
    def update_kinetic_energy(self, kinetic_energy: float | None = None) -> None:
        """Store the kinetic energy, computing it from velocities if not given."""

    @abstractmethod
    def long_range_correction(self) -> None:
        """Evaluate the long range corrections to energy and virial."""


class NVEEnsemble(Ensemble):
    """Microcanonical ensemble of Lennard-Jones atoms on an fcc starting lattice."""

    def __init__(
        self,
        atoms: Sequence[LJAtom],
        temperature: float,
        density: float,
        mol_fract: Sequence[float],
    ) -> None:
        super().__init__(atoms, temperature, density, mol_fract)
        self.energy_lrc = 0.0
        self.virial_lrc = 0.0
        self.initial_coord()
        self.force: Force = LJForce(self.atoms)

    def update_kinetic_energy(self, kinetic_energy: float | None = None) -> None:
        """Store ``kinetic_energy``, or compute it from the velocities when omitted."""
        if kinetic_energy is None:
            kinetic_energy = 0.5 * sum(
                atom.mass * sum(v * v for v in atom.velocity) for atom in self.atoms
            )
        self.kinetic_energy = float(kinetic_energy)

    def scale_velocity(self) -> None:
        """Scale velocities so the kinetic temperature matches the target."""
        current = 2 * self.kinetic_energy / (3 * self.num_atom - 3)
        if current <= 0:
            raise ValueError("kinetic temperature must be positive to scale velocities")
        factor = math.sqrt(self.temperature / current)
        for atom in self.atoms:
            atom.velocity = [v * factor for v in atom.velocity]

    def initial_velocity(self) -> None:
        """Assign random unit-speed velocities with zero total momentum."""
        rng = PressRandom(_VELOCITY_SEED)
        velocities = []
        for _ in self.atoms:
            v = [rng.random(), rng.random(), rng.random()]
            norm = math.sqrt(sum(c * c for c in v))
            velocities.append([c / norm for c in v])

        n = self.num_atom
        mean = [sum(v[k] for v in velocities) / n for k in range(3)]
        for atom, v in zip(self.atoms, velocities):
            atom.velocity = [c - m for c, m in zip(v, mean)]

    def initial_coord(self) -> None:
        """Place atoms on an fcc lattice centred near the origin."""
        n = self.num_atom
        if n < 4:
            raise ValueError("at least 4 atoms are required")

        cells = nearest_int((0.25 * n) ** (1.0 / 3), 1.0)
        while 4 * cells**3 < n:
            cells += 1

        cell_l = self.length / cells
        half = cell_l / 2
        basis = [
            (0.0, 0.0, 0.0),
            (half, half, 0.0),
            (0.0, half, half),
            (half, 0.0, half),
        ]

        def lattice():
            for z in range(cells):
                for y in range(cells):
                    for x in range(cells):
                        for bx, by, bz in basis:
                            yield [
                                bx + cell_l * x - half,
                                by + cell_l * y - half,
                                bz + cell_l * z - half,
                            ]

        for atom, position in zip(self.atoms, lattice()):
            atom.position = position

    def compute_forces(self) -> None:
        """Evaluate forces and store the potential energy and virial."""
        self.potential_energy, self.virial = self.force.compute(self.length)

    def long_range_correction(self) -> None:
        """Evaluate and store the long range energy and virial corrections."""
        self.energy_lrc, self.virial_lrc = self.force.long_range_correction(
            self.composition, self.volume
        )