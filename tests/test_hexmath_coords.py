import pytest

from hexboard.hexmath import Axial, Cube
from hexboard.hexmath import cube_round, cube_to_axial


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0


def test_cube_rejects_off_plane_coordinates():
    with pytest.raises(ValueError):
        Cube(1, 1, 1)


def test_cube_to_axial_drops_the_y_component():
    assert cube_to_axial(Cube(3, -1, -2)) == Axial(3, -2)


def test_cube_round_returns_a_cube_on_the_plane():
    c = cube_round(1.2, -0.7, -0.5)
    assert isinstance(c, Cube)
    assert cube_to_axial(c) == Axial(1, -1)


def test_axial_equality_is_componentwise():
    assert Axial(1, 2) == Axial(1, 2)
    assert Axial(1, 2) != Axial(2, 1)
    assert len({Axial(0, 0), Axial(0, 0), Axial(0, 1)}) == 2


def test_axial_is_immutable():
    a = Axial(0, 0)
    with pytest.raises(AttributeError):
        a.q = 3  # type: ignore[misc]


def test_axial_implicit_s():
    assert Axial(2, -5).s == 3
