"""
JSON report models of the xinject CLI.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class InjectionEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["text", "attribute"]
    attribute: Optional[str] = None
    start: int = Field(..., ge=0, description="Absolute offset of the expression start")
    end: int = Field(..., ge=0, description="Absolute offset just past the expression")
    text: str


class ScanReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    file: str
    language: str
    injections: List[InjectionEntry] = Field(default_factory=list)


class ManifestReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    manifest: Optional[str] = None
    name: Optional[str] = None
    package_roots: List[str] = Field(default_factory=list)


__all__ = ["InjectionEntry", "ScanReport", "ManifestReport"]
