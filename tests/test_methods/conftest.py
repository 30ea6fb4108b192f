"""Shared fixtures for ranking method tests."""

import pytest
from tests.conftest import make_participants, make_scores


@pytest.fixture
def three_by_two():
    """Three participants, two judges, ties at both judges.

         J1  J2
    A    90  70
    B    90  60
    C    80  60

    Spearman: J1 = 1.5, 1.5, 3; J2 = 1, 2.5, 2.5; sums 2.5, 4, 5.5 -> A, B, C
    General:  J1 = 1, 1, 3;     J2 = 1, 2, 2;     sums 2, 3, 5     -> A, B, C
    """
    return make_participants("A", "B", "C"), make_scores({
        "J1": {"A": 90, "B": 90, "C": 80},
        "J2": {"A": 70, "B": 60, "C": 60},
    })


@pytest.fixture
def tied_sums():
    """Two participants tie on rank sum ahead of a third.

         J1  J2
    A    10   9
    B     9  10
    C     8   8

    Both methods: sums A=3, B=3, C=6.
    Spearman places C 3rd (skipped), General places C 2nd (dense).
    """
    return make_participants("A", "B", "C"), make_scores({
        "J1": {"A": 10, "B": 9, "C": 8},
        "J2": {"A": 9, "B": 10, "C": 8},
    })


@pytest.fixture
def unanimous():
    """Three judges agree on A, B, C, D."""
    return make_participants("A", "B", "C", "D"), make_scores({
        "J1": {"A": 9, "B": 8, "C": 7, "D": 6},
        "J2": {"A": 10, "B": 9, "C": 8, "D": 7},
        "J3": {"A": 8.5, "B": 8, "C": 7.5, "D": 7},
    })


@pytest.fixture
def unscored_participant():
    """D was never scored; A and B were scored by J1 only.

         J1
    A     9
    B     8
    D     -

    D has a rank sum of 0, so it is placed first by both methods.
    """
    return make_participants("A", "B", "D"), make_scores({
        "J1": {"A": 9, "B": 8},
    })


@pytest.fixture
def partial_coverage():
    """J2 did not score C.

         J1  J2
    A     9   5
    B     8   6
    C     7   -

    Per-judge ranks: J1 = 1, 2, 3; J2 = A 2, B 1. C gets nothing from J2,
    so all three rank sums are 3 under both methods.
    """
    return make_participants("A", "B", "C"), make_scores({
        "J1": {"A": 9, "B": 8, "C": 7},
        "J2": {"A": 5, "B": 6},
    })
