"""
Vehicle routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.auth import get_current_active_user
from app.crud import vehicles as crud
from app.database import get_db
from app.models.user import User
from app.schemas.common import DeleteResult
from app.schemas.vehicle import Vehicle as VehicleSchema, VehicleCreate, VehicleUpdate, VehicleWithCustomer

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("/", response_model=List[VehicleWithCustomer])
async def get_vehicles(
    customer_id: Optional[int] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Get the current user's vehicles, optionally for one customer.
    """
    return await crud.list_vehicles(db, current_user.id, customer_id=customer_id, search=search)


@router.get("/{vehicle_id}", response_model=VehicleSchema)
async def get_vehicle(
    vehicle_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Get a specific vehicle by ID.
    """
    return await crud.get_vehicle(db, current_user.id, vehicle_id)


@router.post("/", response_model=VehicleSchema, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle: VehicleCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Register a vehicle for one of the current user's customers.
    """
    return await crud.create_vehicle(db, current_user.id, vehicle)


@router.put("/{vehicle_id}", response_model=VehicleSchema)
async def update_vehicle(
    vehicle_id: int,
    vehicle_update: VehicleUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Update a vehicle.
    """
    return await crud.update_vehicle(db, current_user.id, vehicle_id, vehicle_update)


@router.delete("/{vehicle_id}", response_model=DeleteResult)
async def delete_vehicle(
    vehicle_id: int,
    confirm: bool = False,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Delete a vehicle and its service records. Requires ``confirm=true``.
    """
    await crud.get_vehicle(db, current_user.id, vehicle_id)
    if not confirm:
        return DeleteResult(id=vehicle_id, deleted=False)

    await crud.delete_vehicle(db, current_user.id, vehicle_id)
    return DeleteResult(id=vehicle_id, deleted=True)
