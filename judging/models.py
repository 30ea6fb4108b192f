"""Core data models for participants, scores and ranking results."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True)
class Participant:
    """A participant (student) in an event. Identity is ``id``; ``name`` is display-only."""
    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(id=str(data["id"]), name=str(data.get("name", "")))


@dataclass(frozen=True)
class Judge:
    """A judge. The engine never sees these; callers use them to attach names."""
    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(id=str(data["id"]), name=str(data.get("name", "")))


@dataclass(frozen=True)
class Score:
    """One judge's score for one participant.

    Attributes:
        student_id: Participant being scored
        judge_id: Judge giving the score
        value: The score (higher is better)
    """
    student_id: str
    judge_id: str
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"studentId": self.student_id, "judgeId": self.judge_id, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            student_id=str(data["studentId"]),
            judge_id=str(data["judgeId"]),
            value=data["value"],
        )


@dataclass(frozen=True)
class PerJudgeRank:
    """The rank (possibly fractional) one judge's scores imply for a participant."""
    judge_id: str
    rank: float

    def to_dict(self) -> dict[str, Any]:
        return {"judgeId": self.judge_id, "rank": self.rank}


@dataclass(frozen=True)
class ParticipantResult:
    """A participant's outcome from the ranking engine.

    Attributes:
        participant: The participant this result belongs to
        total_score: Sum of all score values given to the participant
        average_score: total_score / number of scores, or 0 with no scores
        per_judge_ranks: Ranks from each judge who scored the participant,
            in order of first appearance of the judge in the score list
        rank_sum: Sum of the per-judge ranks (lower is better)
        final_rank: 1-indexed final placement (tied participants share it)
    """
    participant: Participant
    total_score: float
    average_score: float
    per_judge_ranks: tuple[PerJudgeRank, ...]
    rank_sum: float
    final_rank: int

    def rank_for(self, judge_id: str) -> float | None:
        """Get the rank a judge gave this participant, or None if unscored by that judge."""
        for judge_rank in self.per_judge_ranks:
            if judge_rank.judge_id == judge_id:
                return judge_rank.rank
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "participant": self.participant.to_dict(),
            "totalScore": self.total_score,
            "averageScore": self.average_score,
            "perJudgeRanks": [r.to_dict() for r in self.per_judge_ranks],
            "rankSum": self.rank_sum,
            "finalRank": self.final_rank,
        }
