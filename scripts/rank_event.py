"""Rank the participants of an event snapshot JSON file.

Usage:
    python scripts/rank_event.py event.json
    python scripts/rank_event.py event.json --method general --csv > results.csv
    python scripts/rank_event.py event.json --judges --scores
"""

import argparse
import json
import sys
from pathlib import Path

from judging.aggregate import RankingError
from judging.event import Event, EventError, rank_event
from judging.methods import DEFAULT_METHOD, get_all_ranking_methods
from judging.report import judge_rank_table, results_table, score_matrix, write_csv


def print_table(rows: list[list[str]]) -> None:
    """Print rows as left-aligned columns."""
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    for row in rows:
        print("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())


def main():
    methods = [m.key for m in get_all_ranking_methods()]

    parser = argparse.ArgumentParser(
        description="Rank an event's participants from judges' scores")
    parser.add_argument("input", help="Path to the event JSON file")
    parser.add_argument("-m", "--method", choices=methods, default=DEFAULT_METHOD,
                        help=f"Ranking method (default: {DEFAULT_METHOD})")
    parser.add_argument("--csv", action="store_true",
                        help="Write CSV to stdout instead of a text table")
    parser.add_argument("--judges", action="store_true",
                        help="Also show each judge's ranks")
    parser.add_argument("--scores", action="store_true",
                        help="Also show the raw scores by judge")
    args = parser.parse_args()

    try:
        event = Event.from_dict(json.loads(Path(args.input).read_text(encoding="utf-8")))
        ranking = rank_event(event, args.method)
    except (EventError, RankingError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    tables = [results_table(ranking)]
    if args.judges:
        tables.append(judge_rank_table(ranking))
    if args.scores:
        tables.append(score_matrix(event))

    if args.csv:
        for i, rows in enumerate(tables):
            if i:
                print()
            write_csv(rows, sys.stdout)
        return

    print(f"{event.name} ({ranking.method.name})")
    for rows in tables:
        print()
        print_table(rows)


if __name__ == "__main__":
    main()
