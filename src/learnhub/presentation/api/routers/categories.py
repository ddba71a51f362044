"""Categories router for category management endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from learnhub.application.commands.content import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from learnhub.application.queries.content import (
    GetCategoryQuery,
    ListCategoriesQuery,
)
from learnhub.presentation.api.dependencies import RepoFactory
from learnhub.presentation.api.schemas import (
    CategoryResponse,
    CategoryWriteRequest,
    ErrorResponse,
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Category not found"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={400: {"model": ErrorResponse, "description": "Invalid input"}},
)
async def create_category(
    request: CategoryWriteRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_dto(category)


@router.get("", summary="List categories")
async def list_categories(factory: RepoFactory) -> list[CategoryResponse]:
    categories = await ListCategoriesQuery.from_factory(factory).execute()
    return [CategoryResponse.from_dto(dto) for dto in categories]


@router.get("/{category_id}", summary="Get category", responses=NOT_FOUND)
async def get_category(category_id: UUID, factory: RepoFactory) -> CategoryResponse:
    category = await GetCategoryQuery.from_factory(factory).execute(category_id)
    return CategoryResponse.from_dto(category)


@router.put("/{category_id}", summary="Update category", responses=NOT_FOUND)
async def update_category(
    category_id: UUID,
    request: CategoryWriteRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            category_id=category_id,
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_dto(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    responses=NOT_FOUND,
)
async def delete_category(category_id: UUID, factory: RepoFactory) -> None:
    """
    Delete a category.

    Content filed under it is left untouched and keeps the old topic id.
    """
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
