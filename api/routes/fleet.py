"""Truck and sub-driver endpoints."""
from datetime import datetime
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict

from api.dependencies import get_actor, get_fleet
from models import Actor
from services import FleetService

router = APIRouter()


class TruckCreate(BaseModel):
    plate_number: str
    brand: Optional[str] = None
    model_year: Union[int, str, None] = None
    truck_type: Optional[str] = None
    capacity: Union[float, str, None] = None


class TruckResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    driver_id: str
    plate_number: str
    brand: Optional[str]
    model_year: Optional[int]
    truck_type: str
    capacity: Optional[float]
    created_at: Optional[datetime]


class SubDriverCreate(BaseModel):
    full_name: str
    phone: str
    license_number: Optional[str] = None


class SubDriverResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    driver_id: str
    full_name: str
    phone: str
    license_number: Optional[str]
    created_at: Optional[datetime]


@router.get("/trucks", response_model=List[TruckResponse])
async def list_trucks(actor: Actor = Depends(get_actor), fleet: FleetService = Depends(get_fleet)):
    """List the caller's trucks."""
    return fleet.list_trucks(actor)


@router.post("/trucks", response_model=TruckResponse, status_code=201)
async def add_truck(
    payload: TruckCreate,
    actor: Actor = Depends(get_actor),
    fleet: FleetService = Depends(get_fleet)
):
    """Register a truck."""
    return fleet.add_truck(actor, payload.model_dump(exclude_none=True))


@router.delete("/trucks/{truck_id}", status_code=204)
async def delete_truck(
    truck_id: str,
    actor: Actor = Depends(get_actor),
    fleet: FleetService = Depends(get_fleet)
):
    """Delete a truck."""
    fleet.delete_truck(actor, truck_id)
    return Response(status_code=204)


@router.get("/sub-drivers", response_model=List[SubDriverResponse])
async def list_sub_drivers(actor: Actor = Depends(get_actor), fleet: FleetService = Depends(get_fleet)):
    """List the caller's sub-drivers."""
    return fleet.list_sub_drivers(actor)


@router.post("/sub-drivers", response_model=SubDriverResponse, status_code=201)
async def add_sub_driver(
    payload: SubDriverCreate,
    actor: Actor = Depends(get_actor),
    fleet: FleetService = Depends(get_fleet)
):
    """Register a sub-driver."""
    return fleet.add_sub_driver(actor, payload.model_dump(exclude_none=True))


@router.delete("/sub-drivers/{sub_driver_id}", status_code=204)
async def delete_sub_driver(
    sub_driver_id: str,
    actor: Actor = Depends(get_actor),
    fleet: FleetService = Depends(get_fleet)
):
    """Delete a sub-driver."""
    fleet.delete_sub_driver(actor, sub_driver_id)
    return Response(status_code=204)
