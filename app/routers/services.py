"""
Service routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.auth import get_current_active_user
from app.crud import service_records as crud
from app.database import get_db
from app.models.service import ServiceStatus
from app.models.user import User
from app.schemas.service import Service as ServiceSchema, ServiceCreate, ServiceUpdate, ServiceWithRelations
from app.schemas.common import DeleteResult

router = APIRouter(prefix="/services", tags=["services"])


@router.get("/", response_model=List[ServiceWithRelations])
async def get_services(
    customer_id: Optional[int] = None,
    vehicle_id: Optional[int] = None,
    status_filter: Optional[ServiceStatus] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Get the current user's service records with optional filters.
    """
    return await crud.list_services(
        db,
        current_user.id,
        customer_id=customer_id,
        vehicle_id=vehicle_id,
        status=status_filter,
        search=search,
    )


@router.get("/{service_id}", response_model=ServiceSchema)
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Get a specific service by ID.
    """
    return await crud.get_service(db, current_user.id, service_id)


@router.post("/", response_model=ServiceSchema, status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Record a new service.
    """
    return await crud.create_service(db, current_user.id, service)


@router.put("/{service_id}", response_model=ServiceSchema)
async def update_service(
    service_id: int,
    service_update: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Update a service.
    """
    return await crud.update_service(db, current_user.id, service_id, service_update)


@router.delete("/{service_id}", response_model=DeleteResult)
async def delete_service(
    service_id: int,
    confirm: bool = False,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Delete a service record. Requires ``confirm=true``.
    """
    await crud.get_service(db, current_user.id, service_id)
    if not confirm:
        return DeleteResult(id=service_id, deleted=False)

    await crud.delete_service(db, current_user.id, service_id)
    return DeleteResult(id=service_id, deleted=True)
