import pytest

from candidates import ALL_MASK, Candidates, digit_to_mask, mask_to_digits
from errors import OutOfRangeError


def test_full_and_empty():
    assert len(Candidates()) == 0
    full = Candidates.full()
    assert len(full) == 9
    assert list(full) == list(range(1, 10))
    assert full.mask == ALL_MASK


def test_add_discard_contains():
    c = Candidates()
    c.add(3)
    c.add(7)
    c.add(3)
    assert 3 in c and 7 in c
    assert 5 not in c
    assert len(c) == 2
    c.discard(3)
    c.discard(4)
    assert list(c) == [7]


def test_bit_d_means_digit_d():
    assert digit_to_mask(1) == 0b10
    assert digit_to_mask(9) == 0b10_0000_0000
    assert mask_to_digits(0b1010) == [1, 3]


def test_fill_clear_copy():
    c = Candidates()
    c.fill()
    copy = c.copy()
    c.clear()
    assert len(c) == 0
    assert len(copy) == 9
    assert copy == set(range(1, 10))


@pytest.mark.parametrize("digit", [0, 10, -1])
def test_out_of_range_digit(digit):
    c = Candidates.full()
    with pytest.raises(OutOfRangeError):
        c.add(digit)
    with pytest.raises(OutOfRangeError):
        c.discard(digit)


@pytest.mark.parametrize("value", [0, 10, -3, True, "5", None])
def test_contains_outside_digits_is_false(value):
    assert value not in Candidates.full()


def test_bool_is_not_a_digit():
    with pytest.raises(OutOfRangeError):
        digit_to_mask(True)
