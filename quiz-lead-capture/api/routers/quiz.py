"""
Quiz API Endpoints.

Endpoint for submitting the lead-capture quiz.
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_dispatcher
from api.models import (
    QuizSubmissionRequest,
    QuizSubmissionResponse,
    ServerErrorResponse,
    ValidationErrorResponse,
)
from core.config import Settings, get_settings
from services.notification_dispatcher import NotificationDispatcher
from services.quiz_submission_service import HandlerResponse, handle_quiz_submission

router = APIRouter()


def to_http_response(result: HandlerResponse) -> Response:
    """Convert a service HandlerResponse into a Starlette response."""
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=dict(result.headers),
    )


@router.post(
    "/submit-quiz",
    summary="Submit Quiz",
    description="Capture a quiz lead and email the personalized study plan.",
    response_class=Response,
    responses={
        200: {"model": QuizSubmissionResponse},
        400: {"model": ValidationErrorResponse},
        500: {"model": ServerErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": QuizSubmissionRequest.model_json_schema()}
            },
        }
    },
)
async def submit_quiz(
    request: Request,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
):
    """
    Submit a completed quiz.

    **Process:**
    1. Validates that firstName, email and answers are present
    2. Builds and logs the lead record
    3. Emails the personalized study plan to the quiz taker
    4. Emails a new-lead alert to the administrator

    A failed email never fails the request: each send is isolated and logged.

    **Example request:**
    ```json
    {
      "firstName": "Sam",
      "email": "sam@example.com",
      "answers": {"1": "7", "2": "urgent", "3": "Writing", "4": "none", "5": "minimal", "6": "grammar"}
    }
    ```
    """
    body = await request.body()

    # SES calls block; keep them off the event loop
    result = await run_in_threadpool(
        handle_quiz_submission,
        request.method,
        body.decode("utf-8", errors="replace"),
        dispatcher,
        consultation_url=settings.consultation_url,
    )
    return to_http_response(result)
