"""Pydantic data models used throughout the application."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

NO_SELECTION = "--noSelection--"
NO_SELECTION_LABEL = "-- None --"


class FieldDescriptor(BaseModel):
    """Describes a single field exposed by a SlashDB source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    field_name: str = Field("", alias="fieldName")
    field_label: Optional[str] = Field(None, alias="fieldLabel")


class SchemaNode(BaseModel):
    """A node in the schema tree; nested children are kept but never flattened."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    field: Optional[FieldDescriptor] = None
    children: Dict[str, "SchemaNode"] = Field(default_factory=dict)


class SourceNode(BaseModel):
    """Root node of a schema; ``children`` is required here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    field: Optional[FieldDescriptor] = None
    children: Dict[str, SchemaNode]


class SourceSchema(BaseModel):
    """Schema as handed over by the integration framework."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    source: SourceNode = Field(..., alias="Source")


class Candidate(BaseModel):
    """A selectable delta field option."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str

    @property
    def is_sentinel(self) -> bool:
        return self.value == NO_SELECTION


class AdapterConfiguration(BaseModel):
    """Adapter configuration record; only ``deltaField`` is managed here."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    delta_field: Optional[str] = Field(None, alias="deltaField")

    def as_dict(self) -> Dict[str, object]:
        """Return the configuration with its wire (camelCase) keys."""

        return self.model_dump(by_alias=True)


__all__ = [
    "NO_SELECTION",
    "NO_SELECTION_LABEL",
    "FieldDescriptor",
    "SchemaNode",
    "SourceNode",
    "SourceSchema",
    "Candidate",
    "AdapterConfiguration",
]
