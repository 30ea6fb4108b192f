"""Event snapshots and the boundary between stored events and the ranking engine."""

import math
from dataclasses import dataclass, field
from typing import Any, Self

from judging.engine import compute_ranking
from judging.methods import DEFAULT_METHOD, RankingMethod, get_ranking_method
from judging.models import Judge, Participant, ParticipantResult, Score


class EventError(ValueError):
    """Raised when an event snapshot is malformed."""
    pass


@dataclass(frozen=True)
class Event:
    """Snapshot of an event: its participants, judges and recorded scores.

    Example:
        >>> event = Event(
        ...     id="ev1",
        ...     name="Spring Recital",
        ...     participants=(Participant("s1", "Alice"), Participant("s2", "Bob")),
        ...     judges=(Judge("j1", "Ms. Smith"),),
        ...     scores=(Score("s1", "j1", 9.5), Score("s2", "j1", 8.0)),
        ... )
    """
    id: str
    name: str
    participants: tuple[Participant, ...] = ()
    judges: tuple[Judge, ...] = ()
    scores: tuple[Score, ...] = ()
    created_at: str = ""

    @property
    def num_participants(self) -> int:
        return len(self.participants)

    @property
    def num_judges(self) -> int:
        return len(self.judges)

    def get_score(self, participant_id: str, judge_id: str) -> float | None:
        """Get the score a judge gave a participant, or None if not scored."""
        for score in self.scores:
            if score.student_id == participant_id and score.judge_id == judge_id:
                return score.value
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "participants": [p.to_dict() for p in self.participants],
            "judges": [j.to_dict() for j in self.judges],
            "scores": [s.to_dict() for s in self.scores],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build an Event from its JSON form.

        Participants may be listed under "participants" or "students".

        Raises:
            EventError: If required fields are missing or have the wrong shape
        """
        if not isinstance(data, dict):
            raise EventError("Event must be a JSON object")
        participants = data.get("participants", data.get("students", []))
        try:
            return cls(
                id=str(data.get("id", "")),
                name=str(data.get("name", "")),
                participants=tuple(Participant.from_dict(p) for p in participants),
                judges=tuple(Judge.from_dict(j) for j in data.get("judges", [])),
                scores=tuple(Score.from_dict(s) for s in data.get("scores", [])),
                created_at=str(data.get("createdAt", "")),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise EventError(f"Malformed event data: {e}") from e


def validate_event(event: Event) -> None:
    """Check that an event snapshot is consistent before ranking it.

    Raises:
        EventError: On duplicate participant or judge ids, scores that refer
            to unknown participants or judges, or non-numeric score values
    """
    participant_ids: set[str] = set()
    for participant in event.participants:
        if participant.id in participant_ids:
            raise EventError(f"Duplicate participant id: {participant.id!r}")
        participant_ids.add(participant.id)

    judge_ids: set[str] = set()
    for judge in event.judges:
        if judge.id in judge_ids:
            raise EventError(f"Duplicate judge id: {judge.id!r}")
        judge_ids.add(judge.id)

    for score in event.scores:
        if score.student_id not in participant_ids:
            raise EventError(f"Score refers to unknown participant: {score.student_id!r}")
        if score.judge_id not in judge_ids:
            raise EventError(f"Score refers to unknown judge: {score.judge_id!r}")
        value = score.value
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise EventError(
                f"Invalid score {value!r} from judge {score.judge_id!r} "
                f"for participant {score.student_id!r}"
            )


@dataclass
class EventRanking:
    """Ranking engine output for an event, with judge names attached."""
    event: Event
    method: RankingMethod
    results: list[ParticipantResult] = field(default_factory=list)

    def judge_name(self, judge_id: str) -> str:
        """Display name for a judge, falling back to the id for unknown judges."""
        for judge in self.event.judges:
            if judge.id == judge_id:
                return judge.name
        return judge_id

    def ordered(self) -> list[ParticipantResult]:
        """Results sorted by final rank, then alphabetically by participant name."""
        return sorted(self.results, key=lambda r: (r.final_rank, r.participant.name))

    def get_result(self, participant_id: str) -> ParticipantResult | None:
        for result in self.results:
            if result.participant.id == participant_id:
                return result
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary, in rank order."""
        results = []
        for result in self.ordered():
            entry = result.to_dict()
            for judge_rank in entry["perJudgeRanks"]:
                judge_rank["judgeName"] = self.judge_name(judge_rank["judgeId"])
            results.append(entry)

        return {
            "event": {"id": self.event.id, "name": self.event.name},
            "method": {
                "key": self.method.key,
                "name": self.method.name,
                "description": self.method.description,
            },
            "num_participants": self.event.num_participants,
            "num_judges": self.event.num_judges,
            "judges": [j.to_dict() for j in self.event.judges],
            "results": results,
        }


def rank_event(event: Event, method: str | RankingMethod = DEFAULT_METHOD) -> EventRanking:
    """Validate an event snapshot and rank its participants.

    Raises:
        EventError: If the snapshot is malformed
        UnknownMethodError: If the method key is not registered
    """
    validate_event(event)
    ranking_method = get_ranking_method(method)
    results = compute_ranking(event.participants, event.scores, ranking_method)
    return EventRanking(event=event, method=ranking_method, results=results)
