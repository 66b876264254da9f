"""
API request and response models.

Pydantic models for the follow-up endpoint and OpenAPI schema generation.
Field aliases keep the camelCase wire names used by the calling frontend.
"""

from pydantic import BaseModel, ConfigDict, Field


class FollowUpRequest(BaseModel):
    """Request body for POST /v1/send-followup."""

    model_config = ConfigDict(populate_by_name=True)

    request_id: str | None = Field(None, alias="requestId", description="Request to follow up on")
    user_id: str | None = Field(None, alias="userId", description="User who owns the request")


class FollowUpResponse(BaseModel):
    """Response model for a successfully sent follow-up."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Follow-up email sent successfully"
    email_id: str = Field(..., alias="emailId", description="Provider-assigned message id")


class ErrorResponse(BaseModel):
    """Uniform error envelope for every failure."""

    success: bool = False
    error: str
