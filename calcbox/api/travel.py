"""
Driving endpoints: EV charging, fuel economy and trip time.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from calcbox.calculations import commute

router = APIRouter()


class EvChargingInput(BaseModel):
    battery_kwh: float
    daily_miles: float
    miles_per_kwh: float = commute.TYPICAL_MILES_PER_KWH
    electricity_rate: Optional[float] = None
    charger: commute.ChargerType = commute.ChargerType.HOME
    charging_efficiency: float = commute.TYPICAL_CHARGING_EFFICIENCY
    current_charge: float = 20.0
    target_charge: float = 80.0


class FuelEconomyInput(BaseModel):
    miles: float
    gallons: float
    fuel_cost: float = 0.0


class TripTimeInput(BaseModel):
    distance: float
    speed: float
    stops: int = 0
    stop_minutes: float = commute.DEFAULT_STOP_MINUTES
    unit: commute.DistanceUnit = commute.DistanceUnit.MILES
    departure: Optional[datetime] = None


@router.post("/ev-charging")
async def ev_charging(inputs: EvChargingInput):
    """Per-session, daily, monthly and yearly charging cost."""
    return commute.ev_charging_cost(**inputs.model_dump())


@router.post("/fuel-economy")
async def fuel_economy(inputs: FuelEconomyInput):
    return commute.fuel_economy(inputs.miles, inputs.gallons, inputs.fuel_cost)


@router.post("/trip-time")
async def trip_time(inputs: TripTimeInput):
    return commute.trip_time(**inputs.model_dump())
