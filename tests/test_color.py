import pytest

from meshforge.color import BLACK, TRANSPARENT, WHITE, Color


def test_addition_saturates_at_upper_bound():
    assert Color(200, 200, 200) + Color(100, 100, 100) == Color(255, 255, 255)


def test_subtraction_saturates_at_lower_bound():
    assert Color(10, 20, 30) - Color(100, 100, 100) == Color(0, 0, 0)


def test_addition_is_commutative():
    a = Color(10, 40, 90)
    b = Color(5, 60, 100)
    assert a + b == b + a


def test_adding_black_is_identity():
    c = Color(12, 34, 56)
    assert c + BLACK == c


def test_subtracting_self_gives_black():
    c = Color(12, 34, 56)
    assert c - c == BLACK


def test_multiply_and_divide_by_one_are_identity():
    c = Color(12, 34, 56)
    assert c * 1 == c
    assert c / 1 == c
    assert c * 1.0 == c


def test_scalar_operations_keep_alpha():
    c = Color(12, 34, 56, 100)
    assert (c + 10).a == 100
    assert (c * 2.5).a == 100
    assert (c / 3).a == 100
    assert (c - WHITE).a == 100


def test_multiply_by_large_factor_saturates():
    assert Color(1, 2, 3) * 1000 == WHITE


def test_multiply_by_zero_gives_black():
    assert Color(40, 50, 60) * 0 == BLACK


def test_color_division_by_white_truncates_towards_zero():
    assert Color(254, 128, 0) / WHITE == BLACK


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Color(1, 2, 3) / 0


def test_color_division_by_black_raises():
    with pytest.raises(ZeroDivisionError):
        Color(1, 2, 3) / BLACK


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Color(1, 2, 3) + "red"


def test_default_alpha_is_opaque_and_transparent_is_not():
    assert Color(1, 2, 3).a == 255
    assert TRANSPARENT.a == 0


def test_channels_order():
    c = Color(7, 8, 9)
    assert c.channels == (c.b, c.g, c.r)