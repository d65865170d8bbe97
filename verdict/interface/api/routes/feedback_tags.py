"""Feedback tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from verdict.application.usecase.vote import (
    ListFeedbackTagsResponse,
    ListFeedbackTagsUseCase,
)

router = APIRouter(
    prefix="/feedback-tags",
    tags=["votes"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListFeedbackTagsResponse,
    summary="List allowed feedback tags",
    description="Feedback tags a vote may currently carry. Empty when disabled.",
)
async def list_feedback_tags(
    use_case: FromDishka[ListFeedbackTagsUseCase],
) -> ListFeedbackTagsResponse:
    return await use_case.execute()
