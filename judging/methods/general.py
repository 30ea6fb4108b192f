"""General ranking method."""

from judging.methods import register_ranking_method
from judging.methods.base import RankingMethod
from judging.ties import competition_ranks, dense_ranks


@register_ranking_method
class GeneralMethod(RankingMethod):
    """General ranking method.

    Each judge's scores are ranked highest first with standard competition
    ranking: equal scores share a rank and the following ranks are skipped,
    so scores of 90, 90, 80 give ranks 1, 1, 3.

    Per-judge ranks are summed and participants are placed by that sum,
    lowest first. Equal sums share a placement and the next sum gets the
    next placement regardless of how many tied (dense ranking), so sums of
    3, 3, 6 give 1, 1, 2.
    """

    key = "general"

    @property
    def name(self) -> str:
        return "General Ranking"

    @property
    def description(self) -> str:
        return "Sum of per-judge ranks (ties share, skip); lowest sum wins, no skipped places"

    def judge_rule(self, groups: list[list[str]]) -> dict[str, float]:
        return competition_ranks(groups)

    def final_rule(self, groups: list[list[str]]) -> dict[str, int]:
        return dense_ranks(groups)
