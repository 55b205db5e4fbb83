"""Load endpoints."""
from datetime import date, datetime
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Response
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from config import get_settings
from api.dependencies import get_actor, get_lifecycle
from metrics import MetricsCollector
from models import Actor, get_db
from services import LoadLifecycleManager

router = APIRouter()
settings = get_settings()


class LoadCreate(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    weight: Union[float, str, None] = None
    price: Union[float, str, None] = None
    pickup_date: Union[date, str, None] = None
    receiver_name: Optional[str] = None
    receiver_phone: Optional[str] = None
    receiver_address: Optional[str] = None
    origin_lat: Optional[float] = None
    origin_lng: Optional[float] = None
    dest_lat: Optional[float] = None
    dest_lng: Optional[float] = None
    distance: Optional[float] = None
    truck_size: Optional[str] = None
    body_type: Optional[str] = None
    load_type: Optional[str] = None
    package_type: Optional[str] = None
    description: Optional[str] = None


class AcceptRequest(BaseModel):
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None


class CompleteRequest(BaseModel):
    driver_name: Optional[str] = None


class BidCreate(BaseModel):
    price: Union[float, str]
    message: Optional[str] = None


class LoadResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    driver_id: Optional[str]
    origin: str
    destination: str
    distance: Optional[float]
    weight: float
    price: float
    body_type: Optional[str]
    load_type: Optional[str]
    package_type: Optional[str]
    truck_size: Optional[str]
    pickup_date: Optional[date]
    description: Optional[str]
    receiver_name: Optional[str]
    receiver_phone: Optional[str]
    receiver_address: Optional[str]
    status: str
    created_at: Optional[datetime]


class BidResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    load_id: str
    driver_id: str
    price: float
    message: Optional[str]
    created_at: Optional[datetime]


@router.get("/loads", response_model=List[LoadResponse])
async def list_available_loads(
    body_type: Optional[str] = None,
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """List loads open for acceptance."""
    return lifecycle.list_available_loads(body_type, origin, destination, skip, limit)


@router.get("/loads/mine", response_model=List[LoadResponse])
async def list_my_loads(
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """List loads the caller posted or is driving."""
    return lifecycle.list_loads_for_user(actor.id, skip, limit)


@router.get("/loads/mine/stats")
async def my_load_stats(
    actor: Actor = Depends(get_actor),
    db: Session = Depends(get_db)
):
    """Active and completed trip counts for the calling driver."""
    return MetricsCollector(db).get_driver_metrics(actor.id).to_dict()


@router.get("/loads/{load_id}", response_model=LoadResponse)
async def get_load(
    load_id: str,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Get load by ID."""
    return lifecycle.get_load(load_id)


@router.post("/loads", response_model=LoadResponse, status_code=201)
async def post_load(
    payload: LoadCreate,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Post a new load."""
    return lifecycle.post_load(actor, payload.model_dump(exclude_none=True))


@router.post("/loads/{load_id}/accept", response_model=LoadResponse)
async def accept_load(
    load_id: str,
    payload: Optional[AcceptRequest] = None,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Accept an available load."""
    payload = payload or AcceptRequest()
    return lifecycle.accept_load(load_id, actor, payload.driver_name, payload.driver_phone)


@router.post("/loads/{load_id}/complete", response_model=LoadResponse)
async def complete_load(
    load_id: str,
    payload: Optional[CompleteRequest] = None,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Mark a load delivered."""
    payload = payload or CompleteRequest()
    return lifecycle.complete_load(load_id, actor, payload.driver_name)


@router.post("/loads/{load_id}/release", response_model=LoadResponse)
async def release_load(
    load_id: str,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Cancel the current driver assignment."""
    return lifecycle.cancel_load_assignment(load_id, actor)


@router.post("/loads/{load_id}/cancel", response_model=LoadResponse)
async def cancel_load(
    load_id: str,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Withdraw an available load."""
    return lifecycle.cancel_load(load_id, actor)


@router.delete("/loads/{load_id}", status_code=204)
async def delete_load(
    load_id: str,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Delete an available load."""
    lifecycle.delete_load(load_id, actor)
    return Response(status_code=204)


@router.post("/loads/{load_id}/bids", response_model=BidResponse, status_code=201)
async def submit_bid(
    load_id: str,
    payload: BidCreate,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """Bid on an available load."""
    return lifecycle.submit_bid(load_id, actor, payload.price, payload.message)


@router.get("/loads/{load_id}/bids", response_model=List[BidResponse])
async def list_bids(
    load_id: str,
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """List bids on a load."""
    return lifecycle.list_bids(load_id, actor)
