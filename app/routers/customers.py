"""
Customer routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.auth import get_current_active_user
from app.crud import customers as crud
from app.database import get_db
from app.models.user import User
from app.schemas.customer import Customer as CustomerSchema, CustomerCreate, CustomerSummary, CustomerUpdate
from app.schemas.common import DeleteResult

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerSummary])
async def get_customers(
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Get the current user's customers, newest first, with vehicle and service counts.
    """
    return await crud.list_customers(db, current_user.id, search=search)


@router.get("/{customer_id}", response_model=CustomerSchema)
async def get_customer(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Get a specific customer by ID.
    """
    return await crud.get_customer(db, current_user.id, customer_id)


@router.post("/", response_model=CustomerSchema, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer: CustomerCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Create a new customer.
    """
    return await crud.create_customer(db, current_user.id, customer)


@router.put("/{customer_id}", response_model=CustomerSchema)
async def update_customer(
    customer_id: int,
    customer_update: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Update a customer.
    """
    return await crud.update_customer(db, current_user.id, customer_id, customer_update)


@router.delete("/{customer_id}", response_model=DeleteResult)
async def delete_customer(
    customer_id: int,
    confirm: bool = False,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Delete a customer together with its vehicles and services.

    Nothing is deleted unless ``confirm=true`` is passed.
    """
    await crud.get_customer(db, current_user.id, customer_id)
    if not confirm:
        return DeleteResult(id=customer_id, deleted=False)

    await crud.delete_customer(db, current_user.id, customer_id)
    return DeleteResult(id=customer_id, deleted=True)
