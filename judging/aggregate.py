"""Score aggregation and input screening shared by all ranking methods."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from judging.models import Participant, Score

logger = logging.getLogger(__name__)


class RankingError(ValueError):
    """Base class for caller errors rejected by the ranking engine."""
    pass


class DuplicateScoreError(RankingError):
    """Raised when a judge has more than one score for the same participant."""

    def __init__(self, student_id: str, judge_id: str):
        self.student_id = student_id
        self.judge_id = judge_id
        super().__init__(
            f"Judge {judge_id!r} has more than one score for participant {student_id!r}"
        )


class DuplicateParticipantError(RankingError):
    """Raised when two participants share the same id."""

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(f"Participant id {participant_id!r} appears more than once")


@dataclass(frozen=True)
class ScoreTotals:
    """Raw score aggregates for one participant."""
    total: float
    average: float
    count: int


def screen_scores(participants: Sequence[Participant], scores: Sequence[Score]) -> list[Score]:
    """Check the inputs and return the scores the engine should use.

    Scores for unknown participants are dropped. Duplicate participant ids
    and duplicate (participant, judge) scores are rejected.

    Raises:
        DuplicateParticipantError: If two participants share an id
        DuplicateScoreError: If a judge scored the same participant twice
    """
    known: set[str] = set()
    for participant in participants:
        if participant.id in known:
            raise DuplicateParticipantError(participant.id)
        known.add(participant.id)

    seen: set[tuple[str, str]] = set()
    screened = []
    ignored = 0
    for score in scores:
        if score.student_id not in known:
            ignored += 1
            continue
        pair = (score.student_id, score.judge_id)
        if pair in seen:
            raise DuplicateScoreError(score.student_id, score.judge_id)
        seen.add(pair)
        screened.append(score)

    if ignored:
        logger.warning("Ignoring %d score(s) for unknown participants", ignored)

    return screened


def aggregate_scores(
    participants: Sequence[Participant], scores: Sequence[Score]
) -> dict[str, ScoreTotals]:
    """Compute total and average score per participant.

    A participant with no scores gets a total and average of 0.
    """
    sums: dict[str, float] = {p.id: 0 for p in participants}
    counts: dict[str, int] = {p.id: 0 for p in participants}
    for score in scores:
        if score.student_id in sums:
            sums[score.student_id] += score.value
            counts[score.student_id] += 1

    return {
        pid: ScoreTotals(
            total=sums[pid],
            average=sums[pid] / counts[pid] if counts[pid] else 0,
            count=counts[pid],
        )
        for pid in sums
    }


def scores_by_judge(scores: Sequence[Score]) -> dict[str, dict[str, float]]:
    """Organize scores as judge id -> {participant id -> value}.

    Judges appear in the order they are first seen in the score list.
    """
    table: dict[str, dict[str, float]] = {}
    for score in scores:
        if score.judge_id not in table:
            table[score.judge_id] = {}
        table[score.judge_id][score.student_id] = score.value
    return table
