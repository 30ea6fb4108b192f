"""Tests for tabular report output."""

import io

from judging.event import Event, rank_event
from judging.models import Judge, Participant, Score
from judging.report import (
    format_rank,
    format_score,
    judge_rank_table,
    results_table,
    score_matrix,
    write_csv,
)


def make_event() -> Event:
    return Event(
        id="ev1",
        name="Finals",
        participants=(
            Participant("a", "Alice"),
            Participant("b", "Bob"),
            Participant("c", "Carol"),
        ),
        judges=(Judge("j1", "Judge One"), Judge("j2", "Judge Two")),
        scores=(
            Score("a", "j1", 90), Score("b", "j1", 90), Score("c", "j1", 80),
            Score("a", "j2", 70), Score("b", "j2", 60),
        ),
    )


class TestFormatRank:
    def test_whole(self):
        assert format_rank(3.0) == "3"
        assert format_rank(2) == "2"

    def test_fractional(self):
        assert format_rank(2.5) == "2.5"


class TestFormatScore:
    def test_whole_float_drops_decimal(self):
        assert format_score(90.0) == "90"
        assert format_score(12345678.0) == "12345678"

    def test_int(self):
        assert format_score(7) == "7"

    def test_fraction_is_exact(self):
        assert format_score(8.125) == "8.125"
        assert format_score(0.1) == "0.1"


class TestResultsTable:
    def test_rows_in_rank_order(self):
        rows = results_table(rank_event(make_event()))
        # Sums: Alice 1.5 + 1 = 2.5, Bob 1.5 + 2 = 3.5, Carol 3
        assert rows == [
            ["Rank", "Participant", "Average Score", "Total Score"],
            ["1", "Alice", "80.00", "160.00"],
            ["2", "Carol", "80.00", "80.00"],
            ["3", "Bob", "75.00", "150.00"],
        ]


class TestJudgeRankTable:
    def test_missing_rank_shown_as_dash(self):
        rows = judge_rank_table(rank_event(make_event()))
        assert rows[0] == ["Rank", "Participant", "Judge One", "Judge Two", "Rank Sum"]
        assert rows[1] == ["1", "Alice", "1.5", "1", "2.5"]
        assert rows[2] == ["2", "Carol", "3", "-", "3"]
        assert rows[3] == ["3", "Bob", "1.5", "2", "3.5"]


class TestScoreMatrix:
    def test_scores_by_judge(self):
        assert score_matrix(make_event()) == [
            ["Participant", "Judge One", "Judge Two"],
            ["Alice", "90", "70"],
            ["Bob", "90", "60"],
            ["Carol", "80", "-"],
        ]

    def test_scores_keep_every_digit(self):
        event = Event(
            id="x",
            name="x",
            participants=(Participant("a", "Alice"), Participant("b", "Bob")),
            judges=(Judge("j", "Judge"),),
            scores=(Score("a", "j", 1234567), Score("b", "j", 9.1234567)),
        )
        rows = score_matrix(event)
        assert rows[1] == ["Alice", "1234567"]
        assert rows[2] == ["Bob", "9.1234567"]

    def test_no_judges(self):
        event = Event(id="x", name="x", participants=(Participant("a", "Alice"),))
        assert score_matrix(event) == [["Participant"], ["Alice"]]


class TestWriteCsv:
    def test_quotes_commas(self):
        stream = io.StringIO()
        write_csv([["Rank", "Participant"], ["1", "Smith, Jo"]], stream)
        assert stream.getvalue() == 'Rank,Participant\n1,"Smith, Jo"\n'
