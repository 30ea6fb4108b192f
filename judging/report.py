"""Tabular views of ranking results for report renderers and CSV export."""

import csv
from typing import TextIO

from judging.event import Event, EventRanking

MISSING = "-"


def format_rank(rank: float) -> str:
    """Format a rank without a trailing ".0" (3.0 -> "3", 2.5 -> "2.5")."""
    return f"{rank:g}"


def format_score(value: float) -> str:
    """Format a raw score exactly; whole numbers lose their trailing ".0" (90.0 -> "90")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def results_table(ranking: EventRanking) -> list[list[str]]:
    """Final ranking table: header row followed by one row per participant in rank order."""
    rows = [["Rank", "Participant", "Average Score", "Total Score"]]
    for result in ranking.ordered():
        rows.append([
            str(result.final_rank),
            result.participant.name,
            f"{result.average_score:.2f}",
            f"{result.total_score:.2f}",
        ])
    return rows


def judge_rank_table(ranking: EventRanking) -> list[list[str]]:
    """Per-judge ranks for each participant in rank order, with the rank sum.

    Columns follow the event's judge list; a judge who did not score a
    participant shows as "-".
    """
    judges = ranking.event.judges
    rows = [["Rank", "Participant", *[j.name for j in judges], "Rank Sum"]]
    for result in ranking.ordered():
        row = [str(result.final_rank), result.participant.name]
        for judge in judges:
            rank = result.rank_for(judge.id)
            row.append(MISSING if rank is None else format_rank(rank))
        row.append(format_rank(result.rank_sum))
        rows.append(row)
    return rows


def score_matrix(event: Event) -> list[list[str]]:
    """Raw scores by judge: one row per participant, one column per judge."""
    rows = [["Participant", *[j.name for j in event.judges]]]
    for participant in event.participants:
        row = [participant.name]
        for judge in event.judges:
            value = event.get_score(participant.id, judge.id)
            row.append(MISSING if value is None else format_score(value))
        rows.append(row)
    return rows


def write_csv(rows: list[list[str]], stream: TextIO) -> None:
    """Write table rows to a text stream as CSV."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerows(rows)
