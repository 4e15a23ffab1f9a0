from datetime import date

import pytest

from src.workforce_system.workforce_system.transactions.rules import conflicts_with

EXISTING = (date(2024, 1, 10), date(2024, 2, 10))


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 1, 10), date(2024, 3, 1)),  # same start, longer
        (date(2024, 1, 10), date(2024, 1, 12)),  # same start, shorter
        (date(2024, 1, 20), date(2024, 3, 1)),  # start inside
        (date(2024, 1, 1), date(2024, 1, 20)),  # end inside
        (date(2024, 1, 15), date(2024, 1, 20)),  # fully inside
    ],
)
def test_rejected_ranges(start, end):
    assert conflicts_with(start, end, *EXISTING) is True


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 2, 11), date(2024, 3, 1)),  # adjacent after
        (date(2023, 12, 1), date(2024, 1, 9)),  # before
        (date(2023, 12, 1), date(2024, 1, 10)),  # ends on existing start
        (date(2024, 2, 10), date(2024, 3, 1)),  # starts on existing end
        (date(2024, 1, 1), date(2024, 2, 10)),  # ends on existing end
        (date(2024, 1, 1), date(2024, 3, 1)),  # encloses existing
    ],
)
def test_accepted_ranges(start, end):
    assert conflicts_with(start, end, *EXISTING) is False
