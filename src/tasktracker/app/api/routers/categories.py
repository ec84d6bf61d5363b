"""Category reference data routes."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AdminIdentityDependency, CategoryServiceDependency
from ...schemas import CategoryCreate, CategoryRead, CategoryUpdate, MessageResponse

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryRead], summary="List categories")
async def list_categories(service: CategoryServiceDependency) -> list[CategoryRead]:
    return [CategoryRead.from_document(category) for category in await service.list_categories()]


@router.get("/{category_id}", response_model=CategoryRead, summary="Retrieve a category")
async def get_category(category_id: str, service: CategoryServiceDependency) -> CategoryRead:
    return CategoryRead.from_document(await service.get_category(category_id))


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category (admin)",
)
async def create_category(
    payload: CategoryCreate,
    service: CategoryServiceDependency,
    _: AdminIdentityDependency,
) -> CategoryRead:
    category = await service.create_category(payload.model_dump())
    return CategoryRead.from_document(category)


@router.put("/{category_id}", response_model=CategoryRead, summary="Update a category (admin)")
async def update_category(
    category_id: str,
    payload: CategoryUpdate,
    service: CategoryServiceDependency,
    _: AdminIdentityDependency,
) -> CategoryRead:
    changes = {**payload.model_dump(exclude_unset=True), **(payload.model_extra or {})}
    category = await service.update_category(category_id, changes)
    return CategoryRead.from_document(category)


@router.delete("/{category_id}", response_model=MessageResponse, summary="Delete a category (admin)")
async def delete_category(
    category_id: str,
    service: CategoryServiceDependency,
    _: AdminIdentityDependency,
) -> MessageResponse:
    await service.delete_category(category_id)
    return MessageResponse(message="Category deleted")
