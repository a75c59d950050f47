"""
Date and time endpoints.
"""

from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from calcbox.calculations import dates

router = APIRouter()


class DaysBetweenInput(BaseModel):
    start: date
    end: date


class AddToDateInput(BaseModel):
    start: date
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0


class AgeInput(BaseModel):
    birth_date: date
    on_date: Optional[date] = None


class TimeZonesInput(BaseModel):
    instant: datetime
    zones: List[str]


@router.post("/days-between")
async def days_between(inputs: DaysBetweenInput):
    return {"days": dates.days_between(inputs.start, inputs.end)}


@router.post("/add")
async def add_to_date(inputs: AddToDateInput):
    return {"date": dates.add_to_date(**inputs.model_dump())}


@router.post("/age")
async def age(inputs: AgeInput):
    return dates.calculate_age(inputs.birth_date, inputs.on_date or date.today())


@router.post("/time-zones")
async def time_zones(inputs: TimeZonesInput):
    return dates.convert_time_zones(inputs.instant, inputs.zones)
