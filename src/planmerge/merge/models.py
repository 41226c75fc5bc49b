"""Data models for lesson-plan tables and imports."""

import copy
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PeriodType(str, Enum):
    """Time span a lesson-plan table covers."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    OTHER = "other"


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


class ImportedTable(BaseModel):
    """A parsed spreadsheet paste: one header row plus data rows."""

    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [_cell_text(header) for header in value]
        return value

    @field_validator("rows", mode="before")
    @classmethod
    def _coerce_rows(cls, value: Any) -> list[list[str]]:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            return value
        rows = []
        for row in value:
            if row is None:
                rows.append([])
            elif isinstance(row, (list, tuple)):
                rows.append([_cell_text(cell) for cell in row])
            else:
                rows.append(row)
        return rows


class CustomColumn(BaseModel):
    """A column added on top of a period's built-in columns."""

    key: str
    label: str = ""
    placeholder: str = ""


class TableData(BaseModel):
    """
    A lesson-plan table.

    column_labels is None only on input, meaning the table still uses the
    period's default labels. Tables returned by the engine always carry it.
    """

    model_config = ConfigDict(populate_by_name=True)

    rows: list[dict[str, Any]] = Field(default_factory=list)
    column_labels: Optional[dict[str, str]] = Field(default=None, alias="columnLabels")
    column_widths: dict[str, Union[int, float]] = Field(
        default_factory=dict, alias="columnWidths"
    )
    custom_columns: list[CustomColumn] = Field(default_factory=list, alias="customColumns")

    @field_validator("rows", "custom_columns", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("column_widths", mode="before")
    @classmethod
    def _none_as_empty_dict(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the planner front end stores."""
        return self.model_dump(by_alias=True)


class ColumnMatch(BaseModel):
    """An imported header paired with the existing column it merges into."""

    new: str
    existing: str


class RowUpdate(BaseModel):
    """An imported row label paired with the existing row it updates."""

    model_config = ConfigDict(populate_by_name=True)

    label: str
    existing_label: str = Field(alias="existingLabel")


class ImportReport(BaseModel):
    """Dry-run summary of what a smart import would change."""

    model_config = ConfigDict(populate_by_name=True)

    total_new_columns: int = Field(alias="totalNewColumns")
    matched_columns: int = Field(alias="matchedColumns")
    new_columns: int = Field(alias="newColumns")
    matched_column_details: list[ColumnMatch] = Field(
        default_factory=list, alias="matchedColumnDetails"
    )
    new_column_details: list[str] = Field(default_factory=list, alias="newColumnDetails")
    total_new_rows: int = Field(alias="totalNewRows")
    updated_rows: int = Field(alias="updatedRows")
    added_rows: int = Field(alias="addedRows")
    updated_row_details: list[RowUpdate] = Field(
        default_factory=list, alias="updatedRowDetails"
    )
    added_row_details: list[str] = Field(default_factory=list, alias="addedRowDetails")


def as_imported_table(value: Union[ImportedTable, dict, None]) -> ImportedTable:
    """Accept an ImportedTable, a plain dict or None."""
    if value is None:
        return ImportedTable()
    if isinstance(value, ImportedTable):
        return value.model_copy(deep=True)
    return ImportedTable.model_validate(value)


def as_table_data(value: Union[TableData, dict, None]) -> TableData:
    """Return a deep copy of the current table so callers never see mutation."""
    if value is None:
        return TableData()
    if isinstance(value, TableData):
        return value.model_copy(deep=True)
    return TableData.model_validate(copy.deepcopy(value))
