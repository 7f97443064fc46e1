"""Interatomic force fields acting on a collection of atoms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .atom import Atom, LJAtom
from .auxfunc import nearest_int

_PI = 3.141592654


class Force(ABC):
    """A pairwise force field evaluated over a fixed set of atoms."""

    def __init__(self, atoms: Sequence[Atom]) -> None:
        self.atoms = atoms

    @abstractmethod
    def compute(self, length: float) -> tuple[float, float]:
        """Set every atom's force; return the potential energy and the virial."""

    @abstractmethod
    def long_range_correction(
        self, composition: Sequence[int], volume: float
    ) -> tuple[float, float]:
        """Return the long range corrections to the energy and the virial."""


class LJForce(Force):
    """Truncated Lennard-Jones 12-6 force field.

    The pair parameters are taken from the first atom; they are shared by
    every atom of the ensemble. The potential is cut at ``r_cut`` and not
    shifted, so long range corrections must be added separately.
    """

    def __init__(self, atoms: Sequence[LJAtom]) -> None:
        if not atoms:
            raise ValueError("at least one atom is required")
        super().__init__(atoms)
        first = atoms[0]
        self.epsilon = first.epsilon
        self.sigma = first.sigma
        self.r_cut = first.r_cut

    def _separation(self, a: Atom, b: Atom, length: float) -> list[float]:
        delta = []
        for pa, pb in zip(a.position, b.position):
            d = pa - pb
            delta.append(d - length * nearest_int(d, length))
        return delta

    def compute(self, length: float) -> tuple[float, float]:
        """Set each atom's force from its neighbours inside the cut-off.

        Returns the truncated potential energy and virial of the whole system.
        """
        pot_energy = 0.0
        virial = 0.0

        for i, atom_i in enumerate(self.atoms):
            kind_i = atom_i.atom_type
            force = [0.0, 0.0, 0.0]
            for j, atom_j in enumerate(self.atoms):
                if j == i:
                    continue
                kind_j = atom_j.atom_type
                rij = self._separation(atom_i, atom_j, length)
                rij_sq = sum(d * d for d in rij)

                r_cut = self.r_cut[kind_i][kind_j]
                if rij_sq > r_cut * r_cut:
                    continue

                eps = self.epsilon[kind_i][kind_j]
                sig = self.sigma[kind_i][kind_j]
                sigma2 = sig * sig / rij_sq
                sigma6 = sigma2 * sigma2 * sigma2
                sigma12 = sigma6 * sigma6
                pot = sigma12 - sigma6

                pot_energy += 4 * eps * pot
                virial += 24 * eps * (pot + sigma12) / 3

                fij = 24 * eps * (pot + sigma12) / rij_sq
                for k, d in enumerate(rij):
                    force[k] += fij * d

            atom_i.force = force

        # every pair was visited from both ends
        return pot_energy / 2, virial / 2

    def long_range_correction(
        self, composition: Sequence[int], volume: float
    ) -> tuple[float, float]:
        """Return the tail corrections to energy and virial for the given numbers of atoms."""
        energy_lrc = 0.0
        virial_lrc = 0.0
        num = len(composition)
        for i in range(num):
            for j in range(num):
                sig = self.sigma[i][j]
                cut = self.r_cut[i][j]
                sig3 = sig * sig * sig
                r_cut3 = cut * cut * cut
                sig3r = sig3 / r_cut3
                sig9r = sig3r * sig3r * sig3r
                den = composition[i] * composition[j] * sig3 / volume
                eps = self.epsilon[i][j]
                energy_lrc += (8 / 9.0) * den * _PI * eps * (sig9r - 3 * sig3r)
                virial_lrc += (16 / 9.0) * den * _PI * eps * (2 * sig9r - 3 * sig3r)
        return energy_lrc, virial_lrc