"""Abstract base class for ranking methods."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from judging.aggregate import aggregate_scores, scores_by_judge, screen_scores
from judging.models import Participant, ParticipantResult, PerJudgeRank, Score
from judging.ties import group_by_value, rank_judge


class RankingMethod(ABC):
    """Abstract base class for ranking methods.

    A ranking method ranks each judge's scored participants from best (1) to
    worst, sums those ranks per participant, and places participants by that
    rank sum, lowest first. Methods differ only in the tie rule used at each
    of the two levels. Methods are registered via the
    @register_ranking_method decorator in judging/methods/__init__.py.
    """

    key: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this ranking method."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this ranking method works."""
        return ""

    @abstractmethod
    def judge_rule(self, groups: list[list[str]]) -> dict[str, float]:
        """Tie rule for ranking one judge's scores (groups ordered highest score first)."""
        pass

    @abstractmethod
    def final_rule(self, groups: list[list[str]]) -> dict[str, int]:
        """Tie rule for placing participants (groups ordered lowest rank sum first)."""
        pass

    def judge_ranks(self, scores: Sequence[Score]) -> dict[str, dict[str, float]]:
        """Compute judge id -> {participant id -> rank} for every judge in the scores."""
        return {
            judge_id: rank_judge(judge_scores, self.judge_rule)
            for judge_id, judge_scores in scores_by_judge(scores).items()
        }

    def calculate(
        self, participants: Sequence[Participant], scores: Sequence[Score]
    ) -> list[ParticipantResult]:
        """Rank participants from their scores.

        Args:
            participants: Participants with unique ids
            scores: Scores; those for unknown participants are ignored

        Returns:
            One ParticipantResult per participant, in the order given

        Raises:
            DuplicateParticipantError: If two participants share an id
            DuplicateScoreError: If a judge scored the same participant twice
        """
        scores = screen_scores(participants, scores)
        totals = aggregate_scores(participants, scores)
        judge_ranks = self.judge_ranks(scores)

        per_judge: dict[str, tuple[PerJudgeRank, ...]] = {}
        rank_sums: dict[str, float] = {}
        for participant in participants:
            ranks = tuple(
                PerJudgeRank(judge_id=judge_id, rank=ranks_for_judge[participant.id])
                for judge_id, ranks_for_judge in judge_ranks.items()
                if participant.id in ranks_for_judge
            )
            per_judge[participant.id] = ranks
            # A judge who did not score the participant contributes nothing
            rank_sums[participant.id] = sum(r.rank for r in ranks)

        final_ranks = self.final_rule(group_by_value(rank_sums, descending=False))

        return [
            ParticipantResult(
                participant=participant,
                total_score=totals[participant.id].total,
                average_score=totals[participant.id].average,
                per_judge_ranks=per_judge[participant.id],
                rank_sum=rank_sums[participant.id],
                final_rank=final_ranks[participant.id],
            )
            for participant in participants
        ]
