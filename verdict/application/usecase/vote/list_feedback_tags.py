"""List feedback tags use case."""

from pydantic import BaseModel

from verdict.application.usecase.base import BaseUseCase
from verdict.domain.service import FeedbackCatalog


class ListFeedbackTagsResponse(BaseModel):
    """Currently allowed feedback tags."""

    enabled: bool
    tags: list[str]


class ListFeedbackTagsUseCase(BaseUseCase):
    """Use case for reading the live feedback catalog."""

    def __init__(self, feedback_catalog: FeedbackCatalog) -> None:
        self.feedback_catalog = feedback_catalog

    async def execute(self, request: None = None) -> ListFeedbackTagsResponse:
        tags = self.feedback_catalog.current_tags()
        return ListFeedbackTagsResponse(enabled=bool(tags), tags=list(tags))
