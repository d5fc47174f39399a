"""
Blog API - Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and generates OpenAPI docs from them.

Request bodies declare their fields as optional on purpose: a missing or
empty title/content is answered with the service's own 400 message rather
than a framework validation error.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BlogCreateRequest(BaseModel):
    """Body of POST /blogs/POST."""
    title: Optional[str] = Field(default=None, description="Post title (required, non-empty)")
    content: Optional[str] = Field(default=None, description="Post body (required, non-empty)")


class BlogUpdateRequest(BaseModel):
    """Body of PATCH /blogs/{id}. Both fields are overwritten together."""
    title: Optional[str] = Field(default=None, description="New title (required, non-empty)")
    content: Optional[str] = Field(default=None, description="New body (required, non-empty)")


class ThumbsUpRequest(BaseModel):
    """Body of PATCH /blogs/UPDATE_THUMBSUP/{id}."""
    action: Optional[str] = Field(default=None, description="Either 'UP' or 'DOWN'")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BlogPostResponse(BaseModel):
    """One stored blog post."""
    id: int = Field(description="Database-assigned identifier")
    title: str
    content: str
    thumbsup: int = Field(description="Vote counter; may be negative")

    model_config = {"from_attributes": True}


class WriteResult(BaseModel):
    """
    Outcome descriptor for update, delete and vote statements.

    affected_rows is 0 when no row had the given id; that is still a
    successful response.
    """
    affected_rows: int = Field(description="Rows matched by the statement")


class BlogCreatedResponse(BaseModel):
    success: bool = True
    blog_id: int = Field(alias="blogId", description="Identifier of the new post")

    model_config = {"populate_by_name": True}


class BlogListResponse(BaseModel):
    success: bool = True
    data: List[BlogPostResponse] = Field(description="All posts, ordered by id")


class BlogDetailResponse(BaseModel):
    """
    Single-record lookup result.

    `data` is a one-element list, the shape existing clients
    already parse.
    """
    success: bool = True
    data: List[BlogPostResponse]


class BlogUpdatedResponse(BaseModel):
    success: bool = True
    info: WriteResult


class BlogDeletedResponse(BaseModel):
    success: bool = True
    result: WriteResult


class ThumbsUpResponse(BaseModel):
    message: str = "thumbsup updated successfully"
    result: WriteResult


class WelcomeResponse(BaseModel):
    message: str = "Hello Blog"


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Invalid action",
            "details": {"field": "action"},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
