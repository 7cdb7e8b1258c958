import pytest

from fogl.dual import Dual
from fogl.quat import Quat

R0 = Quat(0, 0, 0, 0)
R1 = Quat(1, 0, 0, 0)
I = Quat(0, 1, 0, 0)
J = Quat(0, 0, 1, 0)
K = Quat(0, 0, 0, 1)

E0 = Dual(R0)
E = Dual(R0, 1)

D10 = Dual(R1, R0)
DI0 = Dual(I, R0)
DJ0 = Dual(J, R0)
DK0 = Dual(K, R0)
D01 = Dual(R0, R1)
D0I = Dual(R0, I)
D0J = Dual(R0, J)
D0K = Dual(R0, K)
BASIS = [D10, DI0, DJ0, DK0, D01, D0I, D0J, D0K]


def test_epsilon_nonzero():
    assert E != 0
    assert E0 == 0


def test_epsilon_squared_is_zero():
    assert E * E == 0


def test_quat_epsilon_products():
    assert K * E * I == K * I * E
    assert K * (E * I) == K * E * I
    assert K * (E * I) == E * (K * I)


def test_quat_times_epsilon_is_dual_part():
    assert I * E == D0I
    assert J * E == D0J
    assert K * E == D0K


def test_real_identity_is_neutral():
    for d in BASIS:
        assert D10 * d == d
        assert d * D10 == d


def test_real_basis_products():
    assert DI0 * DJ0 == DK0
    assert DJ0 * DI0 == -DK0


def test_dual_basis_products_vanish():
    for left in BASIS[4:]:
        for right in BASIS[4:]:
            assert left * right == 0


@pytest.mark.parametrize("u, v, text", [
    (R1, R0, "1"),
    (I, R0, "i"),
    (J, R0, "j"),
    (K, R0, "k"),
    (R0, R1, "E"),
    (R0, I, "iE"),
    (R0, J, "jE"),
    (R0, K, "kE"),
])
def test_basis_labels(u, v, text):
    assert str(Dual(u, v)) == text


def test_str_combinations():
    assert str(D10 + D0I) == "1 + iE"
    assert str(-D10) == "-1"
    assert str(Dual(Quat(2, 0, -3, 0))) == "2 - 3j"
    assert str(E0) == "0"


def test_transform_half_turn():
    result = DJ0.apply(D10 + D0I)
    assert result == Dual(R1, Quat(0, -1, 0, 0))
    assert str(result) == "1 - iE"


def test_conjugate():
    d = Dual(Quat(1, 2, 3, 4), Quat(5, 6, 7, 8))
    assert ~d == Dual(Quat(1, -2, -3, -4), Quat(-5, 6, 7, 8))
    assert ~~d == d


def test_norm():
    assert Dual(Quat(1, 2, 2, 0)).norm() == 3.0
    assert E.norm_squared() == 1


def test_inverse_of_scalar():
    assert Dual(2).inverse() == Dual(0.5)


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        E0.inverse()


def test_add_sub_round_trip():
    a = Dual(Quat(1, 2, 3, 4), Quat(5, 6, 7, 8))
    b = Dual(Quat(-1, 0.5, 3, 2), Quat(0, 1, 0, 1))
    assert a + b - b == a
    assert 1 + E == Dual(1, 1)


def test_scalar_scaling_and_division():
    d = Dual(Quat(1, 2, 3, 4), Quat(5, 6, 7, 8))
    assert 2 * d == d * 2
    assert (d * 2) / 2 == d


def test_rejects_non_numeric_parts():
    with pytest.raises(TypeError):
        Dual("x")