"""Public entry point of the ranking engine."""

import logging
from collections.abc import Sequence

# Import ranking methods to register them
from judging.methods import general  # noqa: F401
from judging.methods import spearman  # noqa: F401

from judging.methods import DEFAULT_METHOD, RankingMethod, get_ranking_method
from judging.models import Participant, ParticipantResult, Score

logger = logging.getLogger(__name__)


def compute_ranking(
    participants: Sequence[Participant],
    scores: Sequence[Score],
    method: str | RankingMethod = DEFAULT_METHOD,
) -> list[ParticipantResult]:
    """Compute score aggregates, per-judge ranks and final ranks.

    The computation is a pure function of its arguments: inputs are not
    modified and nothing is remembered between calls.

    Args:
        participants: Participants to rank, with unique ids
        scores: (participant, judge, value) scores; judges are taken from here
        method: Ranking method key ("spearman" or "general") or instance

    Returns:
        One ParticipantResult per participant, in the order given. Callers
        wanting rank order should sort by final_rank.

    Raises:
        UnknownMethodError: If the method key is not registered
        DuplicateParticipantError: If two participants share an id
        DuplicateScoreError: If a judge scored the same participant twice
    """
    ranking_method = get_ranking_method(method)
    logger.debug(
        "Ranking %d participants from %d scores using %s",
        len(participants), len(scores), ranking_method.name,
    )
    return ranking_method.calculate(participants, scores)
