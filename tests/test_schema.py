"""Tests for period layouts and table export."""

from planmerge.merge import PeriodType, default_labels_for, initialize_table, table_to_imported
from planmerge.merge.schema import default_widths_for


class TestPeriodDefaults:
    """Test built-in labels and widths per period."""

    def test_daily_labels(self):
        assert list(default_labels_for("daily")) == [
            "stage",
            "method",
            "teacherActions",
            "studentActions",
            "assessment",
        ]

    def test_grid_periods_share_labels(self):
        expected = {"focus": "Focus", "languageTarget": "Language Target", "assessment": "Assessment"}
        for period in ("weekly", "monthly", "yearly", "other"):
            assert default_labels_for(period) == expected

    def test_labels_are_copies(self):
        labels = default_labels_for("weekly")
        labels["focus"] = "Changed"
        assert default_labels_for("weekly")["focus"] == "Focus"

    def test_weekly_widths(self):
        assert default_widths_for("weekly") == {
            "day": 150,
            "focus": 200,
            "languageTarget": 200,
            "assessment": 150,
        }

    def test_daily_widths_keep_label_column_narrow(self):
        widths = default_widths_for(PeriodType.DAILY)
        assert widths["stage"] == 150
        assert widths["method"] == 200


class TestInitializeTable:
    """Test creating a period's starting table."""

    def test_weekly_table(self):
        table = initialize_table("weekly")

        assert [row["day"] for row in table.rows] == [
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
        ]
        assert table.rows[0] == {"day": "Monday", "focus": "", "languageTarget": "", "assessment": ""}
        assert table.custom_columns == []

    def test_yearly_table(self):
        table = initialize_table("yearly")
        assert [row["section"] for row in table.rows] == [
            "Desired Results",
            "Assessment Evidence",
            "Unit Overview",
        ]

    def test_daily_rows_do_not_repeat_label_key(self):
        table = initialize_table("daily")
        assert set(table.rows[0]) == {"stage", "method", "teacherActions", "studentActions", "assessment"}

    def test_unknown_period_has_no_rows(self):
        assert initialize_table("other").rows == []


class TestTableToImported:
    """Test flattening a table into headers and rows."""

    def test_headers_and_rows(self, weekly_table):
        imported = table_to_imported(weekly_table, "weekly")

        assert imported.headers == ["Day", "focus", "languageTarget", "assessment", "homework"]
        assert imported.rows[0] == ["Monday", "Reading", "", "", "Page 4"]

    def test_label_header_from_column_labels(self):
        table = {
            "rows": [{"phase": "Engage", "focus": None}],
            "columnLabels": {"phase": "Unit Phase", "focus": "Focus"},
        }

        imported = table_to_imported(table, "monthly")

        assert imported.headers == ["Unit Phase", "focus"]
        assert imported.rows == [["Engage", ""]]

    def test_custom_column_without_label_uses_key(self):
        table = {"rows": [], "columnLabels": {}, "customColumns": [{"key": "custom_1"}]}
        assert table_to_imported(table, "yearly").headers == ["Section", "custom_1"]
