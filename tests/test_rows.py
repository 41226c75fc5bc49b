"""Tests for row matching and row merging."""

import copy

from planmerge.merge import create_row_mapping, merge_rows


EXISTING_ROWS = [
    {"day": "Monday", "focus": "Reading"},
    {"day": "Tuesday", "focus": "Writing"},
]


class TestCreateRowMapping:
    """Test mapping imported rows onto existing rows."""

    def test_exact_matches_ignore_case_and_spacing(self):
        mapping = create_row_mapping(EXISTING_ROWS, "day", [["tuesday"], [" MON DAY "]])
        assert mapping == {0: 1, 1: 0}

    def test_blank_label_always_appends(self):
        mapping = create_row_mapping(EXISTING_ROWS, "day", [[""], [], ["  "]])
        assert mapping == {0: None, 1: None, 2: None}

    def test_fuzzy_match(self):
        mapping = create_row_mapping(EXISTING_ROWS, "day", [["Mon"]])
        assert mapping == {0: 0}

    def test_unmatched_label(self):
        mapping = create_row_mapping(EXISTING_ROWS, "day", [["Wednesday"]])
        assert mapping == {0: None}

    def test_rows_are_not_exclusive(self):
        """Two imported rows may both land on the same existing row."""
        mapping = create_row_mapping(EXISTING_ROWS, "day", [["Monday"], ["monday "]])
        assert mapping == {0: 0, 1: 0}

    def test_label_read_from_label_column(self):
        mapping = create_row_mapping(EXISTING_ROWS, "day", [["Phonics", "Tuesday"]], 1)
        assert mapping == {0: 1}

    def test_existing_rows_without_label_are_skipped(self):
        existing = [{"day": ""}, {"focus": "x"}, {"day": "Monday"}]
        mapping = create_row_mapping(existing, "day", [["Mon"]])
        assert mapping == {0: 2}

    def test_threshold_boundary(self):
        existing = [{"section": "a" * 70 + "c" * 40}]
        assert create_row_mapping(existing, "section", [["a" * 70 + "b" * 30]]) == {0: 0}

        existing = [{"section": "a" * 69 + "c" * 40}]
        assert create_row_mapping(existing, "section", [["a" * 69 + "b" * 31]]) == {0: None}

    def test_no_existing_rows(self):
        assert create_row_mapping([], "day", [["Monday"]]) == {0: None}


class TestMergeRows:
    """Test merging imported rows into existing rows."""

    def test_updates_matched_row_without_rewriting_label(self):
        merged = merge_rows(
            EXISTING_ROWS,
            [["monday", "Phonics"]],
            {0: None, 1: "focus"},
            ["Day", "Focus"],
            "day",
            {0: 0},
        )

        assert merged[0] == {"day": "Monday", "focus": "Phonics"}
        assert merged[1] == EXISTING_ROWS[1]

    def test_unmatched_header_writes_to_normalized_key(self):
        merged = merge_rows(
            EXISTING_ROWS,
            [["Tuesday", "Worksheet B"]],
            {0: None, 1: None},
            ["Day", "Home Work"],
            "day",
            {0: 1},
        )
        assert merged[1] == {"day": "Tuesday", "focus": "Writing", "homework": "Worksheet B"}

    def test_appends_unmatched_row(self):
        merged = merge_rows(
            EXISTING_ROWS,
            [["Wednesday", "Math", "Quiz"]],
            {0: None, 1: "focus", 2: None},
            ["Day", "Focus", "Homework"],
            "day",
            {0: None},
        )

        assert len(merged) == 3
        assert merged[2] == {"day": "Wednesday", "focus": "Math", "homework": "Quiz"}

    def test_missing_cells_become_empty_strings(self):
        merged = merge_rows(
            [],
            [["Friday"]],
            {0: None, 1: "focus"},
            ["Day", "Focus"],
            "day",
            {0: None},
        )
        assert merged == [{"day": "Friday", "focus": ""}]

    def test_label_column_can_be_anywhere(self):
        merged = merge_rows(
            [],
            [["Math", "Thursday"]],
            {0: "focus", 1: None},
            ["Focus", "Day"],
            "day",
            {0: None},
            row_label_column_index=1,
        )
        assert merged == [{"day": "Thursday", "focus": "Math"}]

    def test_blank_headers_are_dropped(self):
        merged = merge_rows(
            [],
            [["Friday", "ignored"]],
            {0: None, 1: None},
            ["Day", " "],
            "day",
            {0: None},
        )
        assert merged == [{"day": "Friday"}]

    def test_later_row_overwrites_shared_target(self):
        merged = merge_rows(
            EXISTING_ROWS,
            [["Monday", "First"], ["monday", "Second"]],
            {0: None, 1: "focus"},
            ["Day", "Focus"],
            "day",
            {0: 0, 1: 0},
        )

        assert len(merged) == 2
        assert merged[0]["focus"] == "Second"

    def test_existing_rows_are_not_mutated(self):
        existing = copy.deepcopy(EXISTING_ROWS)

        merge_rows(
            existing,
            [["Monday", "Changed"]],
            {0: None, 1: "focus"},
            ["Day", "Focus"],
            "day",
            {0: 0},
        )

        assert existing == EXISTING_ROWS
