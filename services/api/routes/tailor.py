from fastapi import APIRouter, Depends, Request

from shared.ai import TailorHandler
from shared.schemas.tailor import ErrorResponse, TailorRequest, TailorSuccessResponse

router = APIRouter(tags=["tailor"])


def get_tailor_handler(request: Request) -> TailorHandler:
    """Return the handler built at app creation time."""
    return request.app.state.tailor_handler


@router.post(
    "/tailor",
    response_model=TailorSuccessResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def tailor_cv(
    payload: TailorRequest,
    handler: TailorHandler = Depends(get_tailor_handler),
):
    """
    Tailor a CV for a job description using the selected provider.

    Returns the tailored CV as a JSON object (strict JSON prompt) or as
    markdown text.
    """
    result = await handler.handle(payload)
    return TailorSuccessResponse(tailored_cv_object=result.tailored_cv_object)
