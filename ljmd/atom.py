"""Atoms carrying their kinematic state and interaction parameters."""

from __future__ import annotations

from dataclasses import dataclass, field

DIMENSIONS = 3
HIGH_DERIVATIVES = 3


def _zero_vector() -> list[float]:
    return [0.0] * DIMENSIONS


def _zero_derivatives() -> list[list[float]]:
    return [[0.0] * DIMENSIONS for _ in range(HIGH_DERIVATIVES)]


def _as_vector(name: str, values) -> list[float]:
    vector = [float(v) for v in values]
    if len(vector) != DIMENSIONS:
        raise ValueError(f"{name} must have {DIMENSIONS} components, got {len(vector)}")
    return vector


@dataclass
class Atom:
    """An atom of a given component type in three dimensions.

    ``high_time_derivs[d][k]`` holds the (d + 3)-th time derivative of the
    position along axis ``k``. ``r_cut[i][j]`` is the cut-off distance for a
    pair of atoms of types ``i`` and ``j``.
    """

    atom_type: int
    mass: float
    r_cut: list[list[float]] = field(default_factory=list)
    position: list[float] = field(default_factory=_zero_vector)
    velocity: list[float] = field(default_factory=_zero_vector)
    acceleration: list[float] = field(default_factory=_zero_vector)
    high_time_derivs: list[list[float]] = field(default_factory=_zero_derivatives)
    force: list[float] = field(default_factory=_zero_vector)
    old_force: list[float] = field(default_factory=_zero_vector)

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.position = _as_vector("position", self.position)
        self.velocity = _as_vector("velocity", self.velocity)
        self.acceleration = _as_vector("acceleration", self.acceleration)
        self.force = _as_vector("force", self.force)
        self.old_force = _as_vector("old_force", self.old_force)
        rows = [_as_vector("high_time_derivs row", row) for row in self.high_time_derivs]
        if len(rows) != HIGH_DERIVATIVES:
            raise ValueError(
                f"high_time_derivs must have {HIGH_DERIVATIVES} rows, got {len(rows)}"
            )
        self.high_time_derivs = rows


@dataclass
class LJAtom(Atom):
    """An atom interacting through the Lennard-Jones 12-6 potential.

    ``epsilon`` and ``sigma`` are the pair parameter tables indexed by atom
    type; they are usually shared between all atoms of an ensemble.
    """

    epsilon: list[list[float]] = field(default_factory=list)
    sigma: list[list[float]] = field(default_factory=list)