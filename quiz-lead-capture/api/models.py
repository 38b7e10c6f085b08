"""
API Request and Response Models.

Pydantic models documenting the quiz submission endpoint in OpenAPI.

The endpoint hands the raw body to the submission service so that presence
validation (400) and parse failures (500) behave the same as the Lambda
entry point; these models describe the wire format, they do not enforce it.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Quiz Submission Models
# ============================================================================

class QuizSubmissionRequest(BaseModel):
    """Quiz form submission."""
    firstName: str = Field(..., description="First name of the quiz taker")
    email: str = Field(..., description="Address the study plan is sent to")
    answers: Dict[str, str] = Field(
        ...,
        description=(
            "Answer codes keyed by question number: 1 target band, 2 timeline, "
            "3 weak section, 4 experience, 5 study time, 6 biggest challenge"
        ),
    )

    class Config:
        json_schema_extra = {
            "example": {
                "firstName": "Sam",
                "email": "sam@example.com",
                "answers": {
                    "1": "7",
                    "2": "urgent",
                    "3": "Writing",
                    "4": "none",
                    "5": "minimal",
                    "6": "grammar"
                }
            }
        }


class QuizSubmissionResponse(BaseModel):
    """Response after a lead has been captured."""
    success: bool
    message: str
    leadId: str

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Lead captured successfully",
                "leadId": "IELTS-1735732800000-k3j9x0q2a"
            }
        }


# ============================================================================
# Error Models
# ============================================================================

class ValidationErrorResponse(BaseModel):
    """Returned when firstName, email or answers is missing."""
    error: str

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Missing required fields"
            }
        }


class ServerErrorResponse(BaseModel):
    """Generic failure; details are only logged server-side."""
    error: str
    message: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Internal server error",
                "message": "Failed to process quiz submission"
            }
        }
