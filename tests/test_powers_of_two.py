import pytest

from sharesquare.powers_of_two import (
    is_power_of_two,
    round_down_power_of_two,
    round_up_power_of_two,
    round_up_power_of_two_strict,
)


@pytest.mark.parametrize(
    "value, want",
    [(-1, 1), (0, 1), (1, 1), (2, 2), (4, 4), (5, 8), (8, 8), (11, 16), (511, 512)],
)
def test_round_up_power_of_two(value, want):
    assert round_up_power_of_two(value) == want


@pytest.mark.parametrize(
    "value, want",
    [(1, 1), (2, 2), (4, 4), (5, 4), (8, 8), (11, 8), (511, 256)],
)
def test_round_down_power_of_two(value, want):
    assert round_down_power_of_two(value) == want


@pytest.mark.parametrize("value", [0, -1, -8])
def test_round_down_power_of_two_rejects_non_positive(value):
    with pytest.raises(ValueError):
        round_down_power_of_two(value)


@pytest.mark.parametrize(
    "value, want",
    [(-1, 1), (0, 1), (1, 2), (2, 4), (4, 8), (5, 8), (8, 16), (11, 16), (511, 512)],
)
def test_round_up_power_of_two_strict(value, want):
    assert round_up_power_of_two_strict(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        (1, True),
        (2, True),
        (4, True),
        (8, True),
        (16, True),
        (32, True),
        (64, True),
        (128, True),
        (256, True),
        (0, False),
        (3, False),
        (12, False),
        (79, False),
    ],
)
def test_is_power_of_two(value, want):
    assert is_power_of_two(value) is want