"""Time integrators advancing atoms by one step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .atom import Atom
from .auxfunc import nearest_int

# Gear fifth-order predictor-corrector coefficients.
G0 = 0.1875
G1 = 0.6972222222
G3 = 0.6111111111
G4 = 0.1666666667
G5 = 0.0166666667


def _wrap(position: list[float], length: float) -> None:
    """Apply periodic boundary conditions in place."""
    for axis, value in enumerate(position):
        position[axis] = value - length * nearest_int(value, length)


def _kinetic_energy(atoms: Sequence[Atom]) -> float:
    return 0.5 * sum(atom.mass * sum(v * v for v in atom.velocity) for atom in atoms)


def _taylor_factors(dt: float) -> tuple[float, float, float, float, float]:
    c1 = dt
    c2 = c1 * dt / 2
    c3 = c2 * dt / 3
    c4 = c3 * dt / 4
    c5 = c4 * dt / 5
    return c1, c2, c3, c4, c5


class Integrator(ABC):
    """Advances the state of a collection of atoms in time."""

    def __init__(self, atoms: Sequence[Atom]) -> None:
        self.atoms = atoms

    @abstractmethod
    def predict(self, length: float, dt: float) -> None:
        """Advance positions and their derivatives before the force evaluation."""

    @abstractmethod
    def correct(self, length: float, dt: float) -> float:
        """Complete the step after the force evaluation; return the kinetic energy."""


class GearPC(Integrator):
    """Gear fifth-order predictor-corrector integrator."""

    def predict(self, length: float, dt: float) -> None:
        """Taylor-expand position and its time derivatives over ``dt``."""
        c1, c2, c3, c4, c5 = _taylor_factors(dt)
        for atom in self.atoms:
            pos = atom.position
            vel = atom.velocity
            acc = atom.acceleration
            d3, d4, d5 = atom.high_time_derivs
            for k in range(3):
                pos[k] += c1 * vel[k] + c2 * acc[k] + c3 * d3[k] + c4 * d4[k] + c5 * d5[k]
            _wrap(pos, length)
            for k in range(3):
                vel[k] += c1 * acc[k] + c2 * d3[k] + c3 * d4[k] + c4 * d5[k]
                acc[k] += c1 * d3[k] + c2 * d4[k] + c3 * d5[k]
                d3[k] += c1 * d4[k] + c2 * d5[k]
                d4[k] += c1 * d5[k]

    def correct(self, length: float, dt: float) -> float:
        """Correct the predicted state from the current forces; return the kinetic energy."""
        c1, c2, c3, c4, c5 = _taylor_factors(dt)
        cr = G0 * c2
        cv = G1 * c2 / c1
        cb = G3 * c2 / c3
        cc = G4 * c2 / c4
        cd = G5 * c2 / c5

        for atom in self.atoms:
            new_acc = [f / atom.mass for f in atom.force]
            adjust = [new - old for new, old in zip(new_acc, atom.acceleration)]
            d3, d4, d5 = atom.high_time_derivs
            for k, delta in enumerate(adjust):
                atom.position[k] += cr * delta
            _wrap(atom.position, length)
            for k, delta in enumerate(adjust):
                atom.velocity[k] += cv * delta
                d3[k] += cb * delta
                d4[k] += cc * delta
                d5[k] += cd * delta
            atom.acceleration[:] = new_acc
        return _kinetic_energy(self.atoms)


class Verlet(Integrator):
    """Velocity-Verlet integrator split into its two half steps.

    The first half treats each atom's stored acceleration as the force acting
    on it and keeps a copy of it as the old force for the second half.
    """

    def first_half(self, length: float, dt: float) -> None:
        """Advance positions and remember the force used to do so."""
        dt2 = dt / 2.0
        dtsq2 = dt * dt2
        for atom in self.atoms:
            force = atom.acceleration
            for k in range(3):
                atom.position[k] += dt * atom.velocity[k] + dtsq2 * force[k] / atom.mass
            _wrap(atom.position, length)
            atom.old_force = list(force)

    def second_half(self, length: float, dt: float) -> float:
        """Update velocities from old and new forces; return the kinetic energy."""
        dt2 = dt / 2.0
        for atom in self.atoms:
            for k in range(3):
                atom.velocity[k] += (atom.force[k] + atom.old_force[k]) * dt2 / atom.mass
        return _kinetic_energy(self.atoms)

    def predict(self, length: float, dt: float) -> None:
        self.first_half(length, dt)

    def correct(self, length: float, dt: float) -> float:
        return self.second_half(length, dt)