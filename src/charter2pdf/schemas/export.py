"""Document metadata and export request models."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from charter2pdf.schemas.sections import Section


class DocumentMeta(BaseModel):
    """Cover page metadata.

    ``last_updated`` is never taken from the wall clock; when unset it is
    derived from the newest ``last_modified`` among the sections, if any.
    """

    title: str = "Constitution"
    subtitle: str | None = None
    version: int | None = None
    last_updated: date | None = None
    adopted_note: str | None = None
    logo_url: str | None = None
    base_url: str | None = None


class ExportMargin(BaseModel):
    """Page margins in CSS units."""

    top: str = "1in"
    right: str = "1in"
    bottom: str = "1in"
    left: str = "1in"


class ExportOptions(BaseModel):
    """Options forwarded to the render service."""

    format: Literal["Letter", "A4"] = "Letter"
    margin: ExportMargin = Field(default_factory=ExportMargin)
    print_background: bool = Field(default=True, serialization_alias="printBackground")


class ExportRequest(BaseModel):
    """Payload posted to the render service."""

    content: str
    sections: list[Section]
    options: ExportOptions = Field(default_factory=ExportOptions)
