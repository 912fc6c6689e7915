"""
Base schemas shared by every resource.

Field names are storage column names. Where the wire (camelCase) name
differs, it is declared explicitly on the field as its alias, so each
resource schema doubles as its wire <-> column mapping table.
"""

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from planner.core.access import stringify, to_numeric_or_null

# Coerced scalar types for client input (and for rows read back).
Text = Annotated[str | None, BeforeValidator(stringify)]
Numeric = Annotated[float | None, BeforeValidator(to_numeric_or_null)]


class RecordBase(BaseModel):
    """Stored row envelope: id, timestamps, soft-delete flag.

    Validated from rows by column name, serialized to the wire by alias.
    Columns the schema does not declare are dropped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    table: ClassVar[str]

    id: str
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    deleted: bool = False

    @classmethod
    def from_row(cls, row: dict[str, Any]):
        return cls.model_validate(row)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class WriteBase(BaseModel):
    """Client payload restricted to a resource's allow-list.

    Validated by wire name only; keys outside the allow-list (including
    id, createdAt, updatedAt, deleted) are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    def to_columns(self, partial: bool = False) -> dict[str, Any]:
        """Column -> value mapping. With `partial`, only fields present in the payload."""
        return self.model_dump(exclude_unset=partial)
