"""
Driving Costs

Daily fuel or charging cost of driving to work, rolled up to weekly,
monthly and yearly figures, with gasoline CO2 for comparison. Also EV
charging cost and time, measured fuel economy, and trip duration.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from calcbox.calculations.errors import InvalidInput, OutOfRange
from calcbox.calculations.rounding import (
    require_choice,
    require_finite,
    require_non_negative,
    require_positive,
)

WEEKS_PER_YEAR = 52
CO2_LBS_PER_GALLON = 19.6

# Typical EV figures used when only the commute is known
TYPICAL_MILES_PER_KWH = 3.5
TYPICAL_ELECTRICITY_RATE = 0.13
TYPICAL_CHARGING_EFFICIENCY = 90.0


class VehicleType(str, Enum):
    GAS = "gas"
    ELECTRIC = "electric"


@dataclass(frozen=True)
class CommuteCost:
    vehicle: VehicleType
    daily_energy: float  # gallons or kWh
    daily_cost: float
    weekly_cost: float
    monthly_cost: float
    yearly_cost: float
    yearly_miles: float
    yearly_co2_lbs: float


def _roll_up(vehicle, daily_energy, daily_cost, daily_miles, work_days, co2_per_unit) -> CommuteCost:
    daily_energy = require_finite(daily_energy, "daily energy")
    daily_cost = require_finite(daily_cost, "daily cost")
    weekly = require_finite(daily_cost * work_days, "weekly cost")
    yearly = require_finite(weekly * WEEKS_PER_YEAR, "yearly cost")
    return CommuteCost(
        vehicle=vehicle,
        daily_energy=daily_energy,
        daily_cost=daily_cost,
        weekly_cost=weekly,
        monthly_cost=yearly / 12,
        yearly_cost=yearly,
        yearly_miles=require_finite(daily_miles * work_days * WEEKS_PER_YEAR, "yearly miles"),
        yearly_co2_lbs=require_finite(
            daily_energy * co2_per_unit * work_days * WEEKS_PER_YEAR, "yearly co2"
        ),
    )


def gas_commute(daily_miles: float, work_days: float, mpg: float, gas_price: float) -> CommuteCost:
    """Gallons = miles / MPG; cost = gallons * price."""
    daily_miles = require_non_negative(daily_miles, "daily_miles")
    work_days = require_non_negative(work_days, "work_days")
    mpg = require_positive(mpg, "mpg")
    gas_price = require_non_negative(gas_price, "gas_price")

    gallons = daily_miles / mpg
    return _roll_up(VehicleType.GAS, gallons, gallons * gas_price, daily_miles, work_days, CO2_LBS_PER_GALLON)


def electric_commute(
    daily_miles: float,
    work_days: float,
    miles_per_kwh: float = TYPICAL_MILES_PER_KWH,
    electricity_rate: float = TYPICAL_ELECTRICITY_RATE,
    charging_efficiency: float = TYPICAL_CHARGING_EFFICIENCY,
) -> CommuteCost:
    """
    kWh drawn from the grid = (miles / miles_per_kwh) / charging efficiency.

    charging_efficiency is a percent in (0, 100].
    """
    daily_miles = require_non_negative(daily_miles, "daily_miles")
    work_days = require_non_negative(work_days, "work_days")
    miles_per_kwh = require_positive(miles_per_kwh, "miles_per_kwh")
    electricity_rate = require_non_negative(electricity_rate, "electricity_rate")
    charging_efficiency = require_positive(charging_efficiency, "charging_efficiency")
    if charging_efficiency > 100:
        raise OutOfRange("charging_efficiency must be at most 100 percent")

    kwh = daily_miles / miles_per_kwh / (charging_efficiency / 100)
    return _roll_up(VehicleType.ELECTRIC, kwh, kwh * electricity_rate, daily_miles, work_days, 0.0)


# --- EV charging ----------------------------------------------------------


class ChargerType(str, Enum):
    HOME = "home"
    PUBLIC = "public"
    DC_FAST = "dc_fast"


# Typical $/kWh by where the car is charged
CHARGER_RATES = {
    ChargerType.HOME: 0.13,
    ChargerType.PUBLIC: 0.20,
    ChargerType.DC_FAST: 0.35,
}
LEVEL_2_KW = 7.2
DC_FAST_KW = 150.0
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class EvChargingResult:
    electricity_rate: float
    kwh_per_charge: float
    cost_per_charge: float
    daily_kwh: float
    daily_cost: float
    monthly_kwh: float
    monthly_cost: float
    yearly_kwh: float
    yearly_cost: float
    cost_per_mile: float
    full_charge_range: float
    level_2_hours: float
    dc_fast_hours: float


def ev_charging_cost(
    battery_kwh: float,
    daily_miles: float,
    miles_per_kwh: float,
    electricity_rate: Optional[float] = None,
    charger: ChargerType = ChargerType.HOME,
    charging_efficiency: float = TYPICAL_CHARGING_EFFICIENCY,
    current_charge: float = 20.0,
    target_charge: float = 80.0,
) -> EvChargingResult:
    """
    Cost and time of charging an electric vehicle.

    One session tops the battery up from ``current_charge`` to
    ``target_charge`` percent; grid energy is the battery energy divided by
    the charging efficiency. Daily use is driven miles over efficiency,
    rolled up over 30-day months and 365-day years. Without an explicit
    ``electricity_rate`` the typical rate for ``charger`` is used.
    """
    battery_kwh = require_positive(battery_kwh, "battery_kwh")
    daily_miles = require_non_negative(daily_miles, "daily_miles")
    miles_per_kwh = require_positive(miles_per_kwh, "miles_per_kwh")
    charger = require_choice(ChargerType, charger, "charger type")
    if electricity_rate is None:
        electricity_rate = CHARGER_RATES[charger]
    electricity_rate = require_non_negative(electricity_rate, "electricity_rate")
    charging_efficiency = require_positive(charging_efficiency, "charging_efficiency")
    if charging_efficiency > 100:
        raise OutOfRange("charging_efficiency must be at most 100 percent")
    current_charge = require_non_negative(current_charge, "current_charge")
    target_charge = require_non_negative(target_charge, "target_charge")
    if target_charge > 100:
        raise OutOfRange("target_charge must be at most 100 percent")
    if target_charge <= current_charge:
        raise InvalidInput("target_charge must be above current_charge")

    efficiency = charging_efficiency / 100
    kwh_per_charge = require_finite(
        battery_kwh * (target_charge - current_charge) / 100 / efficiency, "kWh per charge"
    )
    daily_kwh = require_finite(daily_miles / miles_per_kwh / efficiency, "daily kWh")
    daily_cost = require_finite(daily_kwh * electricity_rate, "daily cost")

    return EvChargingResult(
        electricity_rate=electricity_rate,
        kwh_per_charge=kwh_per_charge,
        cost_per_charge=require_finite(kwh_per_charge * electricity_rate, "cost per charge"),
        daily_kwh=daily_kwh,
        daily_cost=daily_cost,
        monthly_kwh=require_finite(daily_kwh * DAYS_PER_MONTH, "monthly kWh"),
        monthly_cost=require_finite(daily_cost * DAYS_PER_MONTH, "monthly cost"),
        yearly_kwh=require_finite(daily_kwh * DAYS_PER_YEAR, "yearly kWh"),
        yearly_cost=require_finite(daily_cost * DAYS_PER_YEAR, "yearly cost"),
        cost_per_mile=daily_cost / daily_miles if daily_miles > 0 else 0.0,
        full_charge_range=require_finite(battery_kwh * miles_per_kwh, "range"),
        level_2_hours=kwh_per_charge / LEVEL_2_KW,
        dc_fast_hours=kwh_per_charge / DC_FAST_KW,
    )


# --- Fuel economy ---------------------------------------------------------

NATIONAL_AVERAGE_MPG = 25.0

# (upper bound exclusive, label) on MPG
MPG_RATINGS = (
    (15.0, "Poor"),
    (25.0, "Below Average"),
    (35.0, "Good"),
    (45.0, "Excellent"),
)


@dataclass(frozen=True)
class FuelEconomyResult:
    mpg: float
    cost_per_mile: float
    cost_per_gallon: float
    rating: str
    versus_national_average: float


def rate_mpg(mpg: float) -> str:
    for upper, label in MPG_RATINGS:
        if mpg < upper:
            return label
    return "Outstanding"


def fuel_economy(miles: float, gallons: float, fuel_cost: float = 0.0) -> FuelEconomyResult:
    """Measured MPG from a fill-up, with per-mile and per-gallon cost."""
    miles = require_positive(miles, "miles")
    gallons = require_positive(gallons, "gallons")
    fuel_cost = require_non_negative(fuel_cost, "fuel_cost")

    mpg = require_finite(miles / gallons, "mpg")
    return FuelEconomyResult(
        mpg=mpg,
        cost_per_mile=require_finite(fuel_cost / miles, "cost per mile"),
        cost_per_gallon=require_finite(fuel_cost / gallons, "cost per gallon"),
        rating=rate_mpg(mpg),
        versus_national_average=mpg - NATIONAL_AVERAGE_MPG,
    )


# --- Trip time ------------------------------------------------------------


class DistanceUnit(str, Enum):
    MILES = "miles"
    KILOMETERS = "kilometers"


# Average economy for the fuel estimate: 25 MPG, or 10 km per liter
AVERAGE_FUEL_ECONOMY = {
    DistanceUnit.MILES: 25.0,
    DistanceUnit.KILOMETERS: 10.0,
}
DEFAULT_STOP_MINUTES = 15.0


@dataclass(frozen=True)
class TripTimeResult:
    driving_hours: float
    stop_hours: float
    total_hours: float
    hours: int
    minutes: int
    fuel_estimate: float  # gallons or liters
    arrival: Optional[datetime] = None


def trip_time(
    distance: float,
    speed: float,
    stops: int = 0,
    stop_minutes: float = DEFAULT_STOP_MINUTES,
    unit: DistanceUnit = DistanceUnit.MILES,
    departure: Optional[datetime] = None,
) -> TripTimeResult:
    """
    Door-to-door time for a drive at an average speed with rest stops.

    ``hours`` and ``minutes`` split the total, truncated to whole minutes.
    The fuel estimate assumes average economy for the distance unit. With
    a ``departure`` the arrival time is included.
    """
    distance = require_positive(distance, "distance")
    speed = require_positive(speed, "speed")
    stops = require_non_negative(stops, "stops")
    if int(stops) != stops:
        raise InvalidInput(f"stops must be a whole number, got {stops}")
    stop_minutes = require_non_negative(stop_minutes, "stop_minutes")
    unit = require_choice(DistanceUnit, unit, "distance unit")

    driving = require_finite(distance / speed, "driving time")
    stopped = require_finite(stops * stop_minutes / 60, "stop time")
    total = require_finite(driving + stopped, "trip time")
    if total * 60 > timedelta.max.total_seconds() / 60:
        raise OutOfRange("trip time is too long to represent")
    total_minutes = int(total * 60)

    arrival = None
    if departure is not None:
        try:
            arrival = departure + timedelta(minutes=total_minutes)
        except OverflowError:
            raise OutOfRange("arrival time is out of range") from None

    return TripTimeResult(
        driving_hours=driving,
        stop_hours=stopped,
        total_hours=total,
        hours=total_minutes // 60,
        minutes=total_minutes % 60,
        fuel_estimate=distance / AVERAGE_FUEL_ECONOMY[unit],
        arrival=arrival,
    )
