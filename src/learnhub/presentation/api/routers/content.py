"""Content router for learning content endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from learnhub.application.commands.content import (
    ChangeContentTypeCommand,
    CreateContentCommand,
    DeleteContentCommand,
    UpdateContentCommand,
)
from learnhub.application.queries.content import (
    GetContentQuery,
    ListContentQuery,
    SearchContentQuery,
)
from learnhub.presentation.api.dependencies import RepoFactory
from learnhub.presentation.api.schemas import (
    ContentCreateRequest,
    ContentResponse,
    ContentTypeChangeRequest,
    ContentUpdateRequest,
    ErrorResponse,
)

router = APIRouter()

SearchText = Annotated[
    str,
    Query(alias="q", description="Text matched against title or description"),
]

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Content not found"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create content",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Category or creator not found"},
        409: {
            "model": ErrorResponse,
            "description": "Duplicate title or inactive creator",
        },
    },
)
async def create_content(
    request: ContentCreateRequest,
    factory: RepoFactory,
) -> ContentResponse:
    """
    Create learning content.

    The topic must be an existing category, the creator an active user and
    the title must not be used by any other content (case-insensitive).
    """
    command = CreateContentCommand.from_factory(factory)

    try:
        content = await command.execute(
            title=request.title,
            description=request.description,
            type=request.type,
            topic=request.topic,
            created_by=request.created_by,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ContentResponse.from_dto(content)


@router.get("", summary="List content")
async def list_content(factory: RepoFactory) -> list[ContentResponse]:
    contents = await ListContentQuery.from_factory(factory).execute()
    return [ContentResponse.from_dto(dto) for dto in contents]


@router.get("/search", summary="Search content")
async def search_content(
    factory: RepoFactory,
    text: SearchText = "",
) -> list[ContentResponse]:
    """Case-insensitive substring search. An empty query returns everything."""
    contents = await SearchContentQuery.from_factory(factory).execute(text)
    return [ContentResponse.from_dto(dto) for dto in contents]


@router.get("/{content_id}", summary="Get content", responses=NOT_FOUND)
async def get_content(content_id: UUID, factory: RepoFactory) -> ContentResponse:
    content = await GetContentQuery.from_factory(factory).execute(content_id)
    return ContentResponse.from_dto(content)


@router.put("/{content_id}", summary="Update content", responses=NOT_FOUND)
async def update_content(
    content_id: UUID,
    request: ContentUpdateRequest,
    factory: RepoFactory,
) -> ContentResponse:
    command = UpdateContentCommand.from_factory(factory)

    try:
        content = await command.execute(
            content_id=content_id,
            title=request.title,
            description=request.description,
            topic=request.topic,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ContentResponse.from_dto(content)


@router.patch("/{content_id}/type", summary="Change content type", responses=NOT_FOUND)
async def change_content_type(
    content_id: UUID,
    request: ContentTypeChangeRequest,
    factory: RepoFactory,
) -> ContentResponse:
    command = ChangeContentTypeCommand.from_factory(factory)

    try:
        content = await command.execute(content_id=content_id, new_type=request.type)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ContentResponse.from_dto(content)


@router.delete(
    "/{content_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete content",
    responses=NOT_FOUND,
)
async def delete_content(content_id: UUID, factory: RepoFactory) -> None:
    command = DeleteContentCommand.from_factory(factory)

    try:
        await command.execute(content_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
