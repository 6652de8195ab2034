"""
API v1 routes.

Defines REST endpoints driving the three-step signup workflow.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from signupflow.adapters.sessions.memory import InMemorySessionStore
from signupflow.api.dependencies import get_session_store, get_workflow
from signupflow.api.models import ErrorResponse, FieldsUpdateRequest, WorkflowResponse
from signupflow.domain.exceptions import StepOutOfOrder, SubmissionInProgress, WorkflowCompleted
from signupflow.domain.ports import SubmitResult
from signupflow.domain.workflow import SignupWorkflow

router = APIRouter(tags=["v1"])

_not_found = {404: {"model": ErrorResponse, "description": "Signup session not found"}}
_completed = {409: {"model": ErrorResponse, "description": "Signup already submitted"}}


def _already_submitted() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Signup has already been submitted",
    )


@router.post(
    "/signup",
    response_model=WorkflowResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a signup",
    description="Create an empty signup draft positioned at step 1.",
)
async def start_signup(
    store: InMemorySessionStore = Depends(get_session_store),
) -> WorkflowResponse:
    session_id, workflow = store.create()
    return WorkflowResponse.from_workflow(session_id, workflow)


@router.get(
    "/signup/{session_id}",
    response_model=WorkflowResponse,
    responses=_not_found,
    summary="Get signup state",
)
async def get_signup(
    session_id: str,
    workflow: SignupWorkflow = Depends(get_workflow),
) -> WorkflowResponse:
    return WorkflowResponse.from_workflow(session_id, workflow)


@router.patch(
    "/signup/{session_id}/fields",
    response_model=WorkflowResponse,
    responses={
        **_not_found,
        **_completed,
        422: {"description": "Unknown field or non-text value"},
    },
    summary="Update draft fields",
    description="Store field values. Email is trimmed and whitespace is removed "
    "from the phone number before storage.",
)
async def update_fields(
    session_id: str,
    request_data: FieldsUpdateRequest,
    workflow: SignupWorkflow = Depends(get_workflow),
) -> WorkflowResponse:
    try:
        workflow.update_many(request_data.provided())
    except WorkflowCompleted:
        raise _already_submitted() from None
    return WorkflowResponse.from_workflow(session_id, workflow)


@router.post(
    "/signup/{session_id}/advance",
    response_model=WorkflowResponse,
    responses={**_not_found, **_completed},
    summary="Go to the next step",
    description="Validate the current step's fields. The step only advances "
    "when all of them pass; otherwise errors lists one message per failing field.",
)
async def advance(
    session_id: str,
    workflow: SignupWorkflow = Depends(get_workflow),
) -> WorkflowResponse:
    try:
        workflow.advance()
    except WorkflowCompleted:
        raise _already_submitted() from None
    return WorkflowResponse.from_workflow(session_id, workflow)


@router.post(
    "/signup/{session_id}/retreat",
    response_model=WorkflowResponse,
    responses={**_not_found, **_completed},
    summary="Go to the previous step",
)
async def retreat(
    session_id: str,
    workflow: SignupWorkflow = Depends(get_workflow),
) -> WorkflowResponse:
    try:
        workflow.retreat()
    except WorkflowCompleted:
        raise _already_submitted() from None
    return WorkflowResponse.from_workflow(session_id, workflow)


@router.post(
    "/signup/{session_id}/submit",
    response_model=WorkflowResponse,
    responses={
        **_not_found,
        409: {
            "model": ErrorResponse,
            "description": "Not at the last step, already submitting or already submitted",
        },
    },
    summary="Create the account",
    description="Validate every field and submit the signup. On success the "
    "session is closed and redirectTo names the post-signup destination.",
)
async def submit(
    session_id: str,
    workflow: SignupWorkflow = Depends(get_workflow),
    store: InMemorySessionStore = Depends(get_session_store),
) -> WorkflowResponse:
    try:
        result = await workflow.submit()
    except StepOutOfOrder:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Signup is not at the last step",
        ) from None
    except SubmissionInProgress:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Signup is already being submitted",
        ) from None
    except WorkflowCompleted:
        raise _already_submitted() from None

    response = WorkflowResponse.from_workflow(session_id, workflow)
    if result == SubmitResult.COMPLETED:
        # Draft is discarded once the account exists
        store.discard(session_id)
    return response


@router.delete(
    "/signup/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_not_found,
    summary="Abandon a signup",
)
async def abandon(
    session_id: str,
    store: InMemorySessionStore = Depends(get_session_store),
) -> Response:
    if not store.discard(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Signup session not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
