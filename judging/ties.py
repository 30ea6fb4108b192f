"""Tie grouping and rank assignment rules.

Every rule takes tie groups ordered from best to worst, where each group is a
list of participant ids that share exactly the same value, and returns a
mapping of participant id -> rank:

- competition: a group of k at position p all get p; the next group starts
  at p + k (90, 90, 80 -> 1, 1, 3)
- fractional: a group of k occupying p..p+k-1 all get the mean of those
  positions (90, 90, 80 -> 1.5, 1.5, 3)
- dense: each group gets the next integer (90, 90, 80 -> 1, 1, 2)
"""

from collections.abc import Callable

TieRule = Callable[[list[list[str]]], dict[str, float]]


def group_by_value(values: dict[str, float], descending: bool = True) -> list[list[str]]:
    """Group ids by exactly equal value, ordered best group first.

    Args:
        values: Mapping of id -> value
        descending: If True, higher values come first (scores); otherwise
            lower values come first (rank sums)

    Returns:
        List of tie groups. Within a group, ids keep their input order.
    """
    groups: dict[float, list[str]] = {}
    for key, value in values.items():
        if value not in groups:
            groups[value] = []
        groups[value].append(key)

    return [groups[value] for value in sorted(groups.keys(), reverse=descending)]


def competition_ranks(groups: list[list[str]]) -> dict[str, int]:
    """Standard competition ranking ("1224"): ties share a rank, following ranks are skipped."""
    ranks: dict[str, int] = {}
    position = 1
    for group in groups:
        for key in group:
            ranks[key] = position
        position += len(group)
    return ranks


def fractional_ranks(groups: list[list[str]]) -> dict[str, float]:
    """Fractional ranking ("1 2.5 2.5 4"): ties share the mean of the positions they occupy."""
    ranks: dict[str, float] = {}
    position = 1
    for group in groups:
        last = position + len(group) - 1
        shared = (position + last) / 2
        for key in group:
            ranks[key] = shared
        position += len(group)
    return ranks


def dense_ranks(groups: list[list[str]]) -> dict[str, int]:
    """Dense ranking ("1223"): ties share a rank, the next group gets the next integer."""
    ranks: dict[str, int] = {}
    for rank, group in enumerate(groups, start=1):
        for key in group:
            ranks[key] = rank
    return ranks


def rank_judge(judge_scores: dict[str, float], rule: TieRule) -> dict[str, float]:
    """Rank the participants one judge scored, highest score first.

    Args:
        judge_scores: Mapping of participant id -> this judge's score
        rule: Tie rule used to turn tie groups into ranks

    Returns:
        Mapping of participant id -> rank. Participants the judge did not
        score are absent; a judge with no scores yields an empty mapping.
    """
    if not judge_scores:
        return {}
    return rule(group_by_value(judge_scores, descending=True))
