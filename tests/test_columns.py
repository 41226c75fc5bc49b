"""Tests for column set merging."""

from planmerge.merge import (
    CustomColumn,
    build_new_custom_columns,
    merge_column_labels,
    merge_column_widths,
    merge_custom_columns,
)


LABELS = {"focus": "Focus", "assessment": "Assessment"}


class TestBuildNewCustomColumns:
    """Test creating custom columns from unmatched headers."""

    def test_unmatched_header_becomes_custom_column(self):
        columns = build_new_custom_columns(
            ["Day", "Focus", "Home Work"],
            {0: None, 1: "focus", 2: None},
            LABELS,
            [],
            row_label_column_index=0,
        )
        assert columns == [CustomColumn(key="homework", label="Home Work", placeholder="")]

    def test_row_label_column_is_excluded(self):
        columns = build_new_custom_columns(
            ["Notes", "Day"], {0: None, 1: None}, LABELS, [], row_label_column_index=1
        )
        assert [c.key for c in columns] == ["notes"]

    def test_existing_keys_are_not_duplicated(self):
        columns = build_new_custom_columns(
            ["Day", "Homework", "FOCUS"],
            {0: None, 1: None, 2: None},
            LABELS,
            [CustomColumn(key="homework", label="Homework")],
            row_label_column_index=0,
        )
        assert columns == []

    def test_duplicate_new_headers_keep_first(self):
        columns = build_new_custom_columns(
            ["Day", "Materials", "materials "],
            {0: None, 1: None, 2: None},
            LABELS,
            [],
            row_label_column_index=0,
        )
        assert columns == [CustomColumn(key="materials", label="Materials")]

    def test_blank_headers_are_skipped(self):
        columns = build_new_custom_columns(
            ["Day", ""], {0: None, 1: None}, LABELS, [], row_label_column_index=0
        )
        assert columns == []

    def test_header_named_like_row_label_key_is_skipped(self):
        columns = build_new_custom_columns(
            ["Stage", "Day", "Notes"],
            {0: None, 1: None, 2: None},
            LABELS,
            [],
            row_label_column_index=0,
            row_label_key="day",
        )
        assert [c.key for c in columns] == ["notes"]


class TestMergeColumnMetadata:
    """Test labels, widths and custom column lists."""

    def test_labels_are_copied_unchanged(self):
        merged = merge_column_labels(LABELS)

        assert merged == LABELS
        assert merged is not LABELS

    def test_new_columns_get_default_width(self):
        widths = {"focus": 180}
        merged = merge_column_widths(
            widths,
            [CustomColumn(key="homework"), CustomColumn(key="focus")],
        )

        assert merged == {"focus": 180, "homework": 200}
        assert widths == {"focus": 180}

    def test_custom_columns_deduplicated_by_key(self):
        existing = [CustomColumn(key="homework", label="Homework")]
        merged = merge_custom_columns(
            existing,
            [CustomColumn(key="homework", label="HW"), CustomColumn(key="materials", label="Materials")],
        )

        assert [(c.key, c.label) for c in merged] == [
            ("homework", "Homework"),
            ("materials", "Materials"),
        ]
