"""Pydantic schemas for JSON output validation.

This module defines the data structures for all JSON outputs from the CLI,
so every --json response has a consistent, validated shape.

Commands using Pydantic validation:
- render: RenderSuccessResponse | ErrorResponse
- title: TitleSuccessResponse | ErrorResponse
- validate: ValidationSuccessResponse | ValidationFailedResponse
- formats: FormatsResponse | ErrorResponse
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code
        message: Human-readable error message
        position: Offset of a parse error in the format string, if known
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "parse_error", "evaluation_error", "invalid_config"],
    )
    message: str = Field(description="Human-readable error description")
    position: Optional[int] = Field(
        default=None, ge=0, description="Offset of a parse error in the format string"
    )


# ============================================================================
# Render / Title Command Responses
# ============================================================================


class RenderSuccessResponse(BaseModel):
    """Response for a rendered ad-hoc format.

    Attributes:
        status: Always "success"
        format: The format string that was rendered
        result: The rendered text
        variables: Text form of the variables that were bound
    """

    status: Literal["success"] = "success"
    format: str = Field(description="Format string")
    result: str = Field(description="Rendered text")
    variables: Dict[str, str] = Field(default_factory=dict, description="Bound variables")


class TitleSuccessResponse(BaseModel):
    """Response for a rendered media title."""

    status: Literal["success"] = "success"
    title: str = Field(description="Rendered media title")
    format_name: str = Field(description="Name of the title format that was used")
    sanitized: bool = Field(description="Whether invalid file name characters were removed")


# ============================================================================
# Validate Command Responses
# ============================================================================


class ValidationSuccessResponse(BaseModel):
    """Response when a format compiles.

    Attributes:
        status: Always "valid"
        format: The validated format string
        parts: Number of top-level parts of the compiled format
        normalized: The compiled format written back as a format string
    """

    status: Literal["valid"] = "valid"
    format: str = Field(description="Validated format string")
    parts: int = Field(ge=0, description="Number of top-level parts")
    normalized: str = Field(description="Equivalent normalized format string")


class ValidationFailedResponse(BaseModel):
    """Response when a format does not compile."""

    status: Literal["invalid"] = "invalid"
    format: str = Field(description="Validated format string")
    message: str = Field(description="Parse error message")
    position: Optional[int] = Field(
        default=None, ge=0, description="Offset of the error in the format string"
    )


# ============================================================================
# Formats Command Response
# ============================================================================


class FormatInfo(BaseModel):
    """A named title format with its preview."""

    name: str = Field(description="Format name")
    source: str = Field(description="Format string")
    builtin: bool = Field(description="Whether this is a built-in format")
    active: bool = Field(description="Whether this is the configured format")
    preview: Optional[str] = Field(default=None, description="Rendered sample title")
    error: Optional[str] = Field(default=None, description="Preview evaluation error")


class FormatsResponse(BaseModel):
    """Response listing the named title formats."""

    status: Literal["success"] = "success"
    active: str = Field(description="Name of the configured format")
    formats: List[FormatInfo] = Field(description="Registered title formats")
