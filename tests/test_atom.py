import pytest

from ljmd.atom import Atom, LJAtom


def test_atom_defaults_are_zero():
    atom = Atom(atom_type=0, mass=1.0)
    assert atom.position == [0.0, 0.0, 0.0]
    assert atom.velocity == [0.0, 0.0, 0.0]
    assert atom.acceleration == [0.0, 0.0, 0.0]
    assert atom.force == [0.0, 0.0, 0.0]
    assert atom.old_force == [0.0, 0.0, 0.0]
    assert atom.high_time_derivs == [[0.0] * 3 for _ in range(3)]


def test_atom_keeps_type_and_mass():
    atom = Atom(atom_type=2, mass=3.5)
    assert atom.atom_type == 2
    assert atom.mass == 3.5


def test_state_is_not_shared_between_atoms():
    a = Atom(atom_type=0, mass=1.0)
    b = Atom(atom_type=0, mass=1.0)
    a.velocity[0] = 4.0
    a.high_time_derivs[1][2] = 7.0
    assert b.velocity[0] == 0.0
    assert b.high_time_derivs[1][2] == 0.0


def test_given_vectors_are_copied():
    pos = [1.0, 2.0, 3.0]
    atom = Atom(atom_type=0, mass=1.0, position=pos)
    pos[0] = 99.0
    assert atom.position == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("name", ["position", "velocity", "acceleration", "force", "old_force"])
def test_wrong_vector_length_raises(name):
    with pytest.raises(ValueError):
        Atom(atom_type=0, mass=1.0, **{name: [1.0, 2.0]})


def test_wrong_derivative_shape_raises():
    with pytest.raises(ValueError):
        Atom(atom_type=0, mass=1.0, high_time_derivs=[[0.0, 0.0, 0.0]])


def test_lj_atom_shares_parameter_tables():
    epsilon = [[1.0, 0.5], [0.5, 2.0]]
    sigma = [[1.0, 1.1], [1.1, 1.2]]
    r_cut = [[2.5, 2.5], [2.5, 2.5]]
    a = LJAtom(atom_type=0, mass=1.0, r_cut=r_cut, epsilon=epsilon, sigma=sigma)
    b = LJAtom(atom_type=1, mass=2.0, r_cut=r_cut, epsilon=epsilon, sigma=sigma)
    assert a.epsilon is b.epsilon
    assert a.sigma is b.sigma
    assert a.r_cut is b.r_cut
    assert b.epsilon[b.atom_type][a.atom_type] == epsilon[1][0]


def test_lj_atom_is_an_atom_with_zero_state():
    atom = LJAtom(atom_type=1, mass=2.0, epsilon=[[1.0]], sigma=[[1.0]])
    assert isinstance(atom, Atom)
    assert atom.acceleration == [0.0, 0.0, 0.0]
    assert atom.sigma == [[1.0]]