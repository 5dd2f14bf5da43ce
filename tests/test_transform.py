"""
Tests for record-to-entry conversion and ranking.
"""

import math

import pytest

from leaderboard.ranking.transform import (
    Entry,
    entries_to_frame,
    parse_score,
    to_entry,
    transform_data,
)


class TestParseScore:
    """Tests for parse_score function."""

    def test_integer(self):
        assert parse_score("88") == 88.0

    def test_decimal(self):
        assert parse_score("88.5") == 88.5

    def test_leading_dot(self):
        assert parse_score(".5") == 0.5

    def test_trailing_text_ignored(self):
        assert parse_score("88%") == 88.0
        assert parse_score("9.5 pts") == 9.5

    def test_leading_whitespace_skipped(self):
        assert parse_score("   42") == 42.0

    def test_signs(self):
        assert parse_score("-3") == -3.0
        assert parse_score("+7") == 7.0

    def test_exponent(self):
        assert parse_score("1e3") == 1000.0
        assert parse_score("2.5E-1") == 0.25

    def test_incomplete_exponent_ignored(self):
        assert parse_score("1e") == 1.0

    def test_infinity(self):
        assert math.isinf(parse_score("Infinity"))
        assert parse_score("-Infinity") < 0

    def test_non_ascii_digits_are_not_numbers(self):
        assert parse_score("\u0663") == 0
        assert parse_score("7\u0663") == 7.0

    @pytest.mark.parametrize("text", ["", "abc", "N/A", "%88", "-", ".", None])
    def test_unparsable_is_zero(self, text):
        assert parse_score(text) == 0


class TestToEntry:
    """Tests for field resolution in to_entry."""

    def test_full_record(self):
        entry = to_entry({"First Name": "Ann", "Last Name": "Lee", "Dealership": "Acme", "Total Score": "88"})
        assert entry == Entry(name="Ann Lee", group="Acme", score=88.0)

    def test_last_name_only(self):
        entry = to_entry({"Last Name": "Lee", "Total Score": "88"})
        assert entry.name == "Lee"

    def test_first_name_only(self):
        entry = to_entry({"First Name": "Ann", "Last Name": ""})
        assert entry.name == "Ann"

    def test_no_name_fields(self):
        assert to_entry({"Score": "1"}).name == ""

    def test_alias_columns(self):
        entry = to_entry({"First": "Bo", "Last name": "Ray", "Dealer": "Zeta", "Score": "70"})
        assert entry == Entry(name="Bo Ray", group="Zeta", score=70.0)

    def test_company_and_total_aliases(self):
        entry = to_entry({"First name": "Cy", "Last": "Fox", "Company": "Orbit", "Total": "12.5"})
        assert entry == Entry(name="Cy Fox", group="Orbit", score=12.5)

    def test_empty_alias_falls_through(self):
        # An empty preferred column defers to the next alias
        entry = to_entry({"Total Score": "", "Score": "64", "Dealership": "", "Dealer": "Acme"})
        assert entry.score == 64.0
        assert entry.group == "Acme"

    def test_missing_group_is_empty(self):
        assert to_entry({"First Name": "Ann"}).group == ""

    def test_missing_score_is_zero(self):
        assert to_entry({"First Name": "Ann"}).score == 0

    def test_entry_is_immutable(self):
        entry = to_entry({"First Name": "Ann", "Total Score": "1"})
        with pytest.raises(AttributeError):
            entry.score = 99


class TestTransformData:
    """Tests for transform_data ranking."""

    def test_end_to_end_example(self):
        records = [
            {"First Name": "Ann", "Last Name": "Lee", "Dealership": "Acme", "Total Score": "88"},
            {"First Name": "Bo", "Last Name": "Ray", "Dealership": "Acme", "Total Score": "95"},
        ]
        assert transform_data(records) == [
            Entry(name="Bo Ray", group="Acme", score=95.0),
            Entry(name="Ann Lee", group="Acme", score=88.0),
        ]

    def test_empty(self):
        assert transform_data([]) == []

    def test_ties_keep_record_order(self):
        records = [
            {"First Name": "A", "Total Score": "50"},
            {"First Name": "B", "Total Score": "90"},
            {"First Name": "C", "Total Score": "50"},
            {"First Name": "D", "Total Score": "90"},
            {"First Name": "E", "Total Score": "50"},
        ]
        names = [e.name for e in transform_data(records)]
        assert names == ["B", "D", "A", "C", "E"]

    def test_unparsable_scores_rank_as_zero(self):
        records = [
            {"First Name": "A", "Total Score": "n/a"},
            {"First Name": "B", "Total Score": "-5"},
            {"First Name": "C", "Total Score": "10"},
        ]
        result = transform_data(records)
        assert [e.name for e in result] == ["C", "A", "B"]
        assert result[1].score == 0

    def test_scores_non_increasing(self):
        scores = ["3", "17.5", "x", "17.5", "-2", "100", "0", "42"]
        records = [{"First Name": str(i), "Total Score": s} for i, s in enumerate(scores)]
        result = transform_data(records)
        for a, b in zip(result, result[1:]):
            assert a.score >= b.score


class TestEntriesToFrame:
    """Tests for entries_to_frame function."""

    def test_columns_and_ranks(self):
        entries = [Entry("Bo Ray", "Acme", 95.0), Entry("Ann Lee", "Acme", 88.0)]
        df = entries_to_frame(entries)
        assert list(df.columns) == ["rank", "name", "group", "score"]
        assert df["rank"].tolist() == [1, 2]
        assert df["name"].tolist() == ["Bo Ray", "Ann Lee"]

    def test_empty(self):
        df = entries_to_frame([])
        assert df.empty
        assert list(df.columns) == ["rank", "name", "group", "score"]
