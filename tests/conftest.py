"""Shared test helpers."""

import json
from pathlib import Path

import pytest

from judging.models import Participant, ParticipantResult, Score


def make_participants(*ids: str) -> list[Participant]:
    """Build participants whose names are their ids."""
    return [Participant(id=pid, name=pid) for pid in ids]


def make_scores(scores_table: dict[str, dict[str, float]]) -> list[Score]:
    """Build a Score list from a compact scores table.

    Args:
        scores_table: {judge_id: {participant_id: value}}

    Returns:
        Scores in judge order, then participant order within each judge.
    """
    return [
        Score(student_id=pid, judge_id=judge_id, value=value)
        for judge_id, judge_scores in scores_table.items()
        for pid, value in judge_scores.items()
    ]


def final_ranks(results: list[ParticipantResult]) -> dict[str, int]:
    """Map participant id -> final rank."""
    return {r.participant.id: r.final_rank for r in results}


def rank_sums(results: list[ParticipantResult]) -> dict[str, float]:
    """Map participant id -> rank sum."""
    return {r.participant.id: r.rank_sum for r in results}


def judge_ranks(results: list[ParticipantResult], judge_id: str) -> dict[str, float]:
    """Map participant id -> rank from one judge, for participants that judge scored."""
    return {
        r.participant.id: r.rank_for(judge_id)
        for r in results
        if r.rank_for(judge_id) is not None
    }


# --- Event fixture (anonymized with scripts/anonymize_event.py) ---

FIXTURES_DIR = Path(__file__).parent / "fixtures"
EVENT_FIXTURE = FIXTURES_DIR / "event.json"


@pytest.fixture
def event_data():
    """Five participants, three judges; Heike Vogel did not score Priya Holloway.

              Claire  Samuel  Heike
    Léa        9.5     9       8.5
    Marcus     8.75    9.25    9
    Jürgen     8.75    8       7.5
    Priya      7       8       -
    Oliver     6.5     7.5     7
    """
    return json.loads(EVENT_FIXTURE.read_text(encoding="utf-8"))
