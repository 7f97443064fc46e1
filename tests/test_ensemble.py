import math

import pytest

from ljmd.atom import LJAtom
from ljmd.ensemble import NVEEnsemble
from ljmd.force import LJForce


def _atoms(n, types=None, mass=1.0):
    eps = [[1.0, 1.0], [1.0, 1.0]]
    sig = [[1.0, 1.0], [1.0, 1.0]]
    cut = [[2.5, 2.5], [2.5, 2.5]]
    types = types or [0] * n
    return [
        LJAtom(atom_type=t, mass=mass, r_cut=cut, epsilon=eps, sigma=sig)
        for t in types
    ]


def _ensemble(n=32, temperature=1.0, density=0.8, mol_fract=(1.0,)):
    return NVEEnsemble(_atoms(n), temperature, density, list(mol_fract))


def test_volume_and_length():
    ens = _ensemble(n=32, density=0.8)
    assert ens.volume == pytest.approx(32 / 0.8)
    assert ens.length ** 3 == pytest.approx(ens.volume)
    assert ens.num_atom == 32
    assert ens.num_comp == 1


def test_composition_last_component_takes_remainder():
    atoms = _atoms(5, types=[0, 0, 1, 1, 1])
    ens = NVEEnsemble(atoms, 1.0, 0.5, [0.5, 0.5])
    assert ens.composition == [2, 3]
    assert sum(ens.composition) == 5


def test_too_few_atoms_rejected():
    with pytest.raises(ValueError):
        _ensemble(n=3)


def test_invalid_density_rejected():
    with pytest.raises(ValueError):
        _ensemble(density=0.0)


def test_unit_cell_positions_for_four_atoms():
    ens = _ensemble(n=4, density=1.0)
    half = ens.length / 2
    expected = [
        [-half, -half, -half],
        [0.0, 0.0, -half],
        [-half, 0.0, 0.0],
        [0.0, -half, 0.0],
    ]
    for atom, pos in zip(ens.atoms, expected):
        assert atom.position == pytest.approx(pos)


def test_lattice_positions_distinct_and_in_box():
    ens = _ensemble(n=32, density=0.8)
    cell_l = ens.length / 2
    half = cell_l / 2
    positions = [tuple(a.position) for a in ens.atoms]
    min_d = min(
        math.dist(p, q)
        for i, p in enumerate(positions)
        for q in positions[i + 1:]
    )
    assert min_d == pytest.approx(cell_l / math.sqrt(2))
    for p in positions:
        for c in p:
            assert -half - 1e-12 <= c < ens.length - half


def test_initial_velocity_zero_momentum_and_deterministic():
    ens = _ensemble()
    ens.initial_velocity()
    first = [list(a.velocity) for a in ens.atoms]
    for k in range(3):
        assert sum(v[k] for v in first) == pytest.approx(0.0, abs=1e-12)
    ens.initial_velocity()
    assert [a.velocity for a in ens.atoms] == first


def test_update_kinetic_energy_explicit_and_computed():
    ens = _ensemble(n=4)
    ens.update_kinetic_energy(5.0)
    assert ens.kinetic_energy == 5.0
    for atom in ens.atoms:
        atom.velocity = [1.0, 0.0, 0.0]
    ens.update_kinetic_energy()
    assert ens.kinetic_energy == pytest.approx(2.0)


def test_scale_velocity_reaches_target_temperature():
    ens = _ensemble(n=32, temperature=1.5)
    ens.initial_velocity()
    ens.update_kinetic_energy()
    ens.scale_velocity()
    ens.update_kinetic_energy()
    temp = 2 * ens.kinetic_energy / (3 * ens.num_atom - 3)
    assert temp == pytest.approx(1.5)


def test_scale_velocity_without_motion_raises():
    ens = _ensemble(n=4)
    ens.update_kinetic_energy()
    with pytest.raises(ValueError):
        ens.scale_velocity()


def test_init_acceleration_divides_force_by_mass():
    ens = NVEEnsemble(_atoms(4, mass=2.0), 1.0, 0.5, [1.0])
    for i, atom in enumerate(ens.atoms):
        atom.force = [float(i), 2.0 * i, -4.0]
    ens.init_acceleration()
    for i, atom in enumerate(ens.atoms):
        assert atom.acceleration == pytest.approx([i / 2.0, float(i), -2.0])


def test_compute_forces_matches_force_field_and_conserves_momentum():
    ens = _ensemble(n=32, density=0.8)
    ens.atoms[0].position[0] += 0.05
    ens.compute_forces()
    expected = LJForce(ens.atoms).compute(ens.length)
    assert (ens.potential_energy, ens.virial) == pytest.approx(expected)
    for k in range(3):
        assert sum(a.force[k] for a in ens.atoms) == pytest.approx(0.0, abs=1e-9)


def test_long_range_correction_matches_force_field():
    ens = _ensemble(n=32, density=0.8)
    ens.long_range_correction()
    expected = LJForce(ens.atoms).long_range_correction(ens.composition, ens.volume)
    assert (ens.energy_lrc, ens.virial_lrc) == pytest.approx(expected)
    assert ens.energy_lrc < 0
    assert ens.virial_lrc < 0