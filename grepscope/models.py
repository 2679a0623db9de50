"""Data models for structural context rendering."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ContextOptions(BaseModel):
    """Switches controlling how a TreeContext selects and renders lines."""
    color: bool = False
    verbose: bool = False
    line_number: bool = False
    parent_context: bool = True
    child_context: bool = True
    last_line: bool = True
    margin: int = Field(default=3, ge=0)
    mark_lois: bool = True
    header_max: int = Field(default=10, ge=1)
    show_top_of_file_parent_scope: bool = False
    loi_pad: int = Field(default=1, ge=0)


class ContextRequest(BaseModel):
    """Request to render a structural excerpt of one file."""
    filename: Optional[str] = None
    code: Optional[str] = None
    path: Optional[str] = None
    pattern: Optional[str] = None
    ignore_case: bool = False
    lines: list[int] = Field(default_factory=list)
    options: Optional[ContextOptions] = None

    @model_validator(mode="after")
    def _require_source(self) -> "ContextRequest":
        if self.code is None and not self.path:
            raise ValueError("Either 'code' or 'path' is required")
        if self.code is not None and not (self.filename or self.path):
            raise ValueError("'filename' is required when sending 'code'")
        return self


class ContextResponse(BaseModel):
    """Rendered excerpt plus the line selection behind it."""
    filename: str
    language: str
    lines_of_interest: list[int] = Field(default_factory=list)
    shown_lines: list[int] = Field(default_factory=list)
    text: str = ""


class LanguageInfo(BaseModel):
    extension: str
    language: str
