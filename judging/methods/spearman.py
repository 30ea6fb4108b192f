"""Spearman rank-sum method (the default)."""

from judging.methods import register_ranking_method
from judging.methods.base import RankingMethod
from judging.ties import competition_ranks, fractional_ranks


@register_ranking_method
class SpearmanMethod(RankingMethod):
    """Spearman rank-sum method.

    Each judge's scores are ranked highest first. Participants a judge scored
    equally share the mean of the positions they occupy (Spearman's tie rule),
    so scores of 90, 90, 80 give ranks 1.5, 1.5, 3.

    Per-judge ranks are summed, and participants are placed by that sum,
    lowest first. Equal sums share a placement and the following placements
    are skipped (competition ranking), so sums of 3, 3, 6 give 1, 1, 3.
    """

    key = "spearman"

    @property
    def name(self) -> str:
        return "Spearman Rank Sum"

    @property
    def description(self) -> str:
        return "Sum of per-judge ranks (ties averaged); lowest sum wins, tied places skip"

    def judge_rule(self, groups: list[list[str]]) -> dict[str, float]:
        return fractional_ranks(groups)

    def final_rule(self, groups: list[list[str]]) -> dict[str, int]:
        return competition_ranks(groups)
