"""
Unit and currency conversion endpoints.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from calcbox.calculations import conversions

router = APIRouter()


class UnitConversionInput(BaseModel):
    category: conversions.UnitCategory
    value: float
    from_unit: str
    to_unit: str


class CurrencyConversionInput(BaseModel):
    amount: float
    from_currency: str
    to_currency: str


def get_currency_table() -> conversions.CurrencyTable:
    """Exchange-rate table dependency; swap in live rates by overriding."""
    return conversions.DEFAULT_CURRENCY_TABLE


@router.get("/units")
async def list_units():
    """Supported unit identifiers per category."""
    return {
        category.value: conversions.list_units(category)
        for category in conversions.UnitCategory
    }


@router.post("/units")
async def convert_units(inputs: UnitConversionInput):
    result = conversions.convert_units(
        inputs.value, inputs.from_unit, inputs.to_unit, inputs.category
    )
    return {
        "value": inputs.value,
        "from_unit": inputs.from_unit,
        "to_unit": inputs.to_unit,
        "result": result,
    }


@router.post("/currency")
async def convert_currency(
    inputs: CurrencyConversionInput,
    table: conversions.CurrencyTable = Depends(get_currency_table),
):
    converted, rate = conversions.convert_currency(
        inputs.amount, inputs.from_currency, inputs.to_currency, table
    )
    return {
        "amount": inputs.amount,
        "from_currency": inputs.from_currency.upper(),
        "to_currency": inputs.to_currency.upper(),
        "converted": converted,
        "exchange_rate": rate,
        "rates_version": table.version,
    }


@router.get("/currencies")
async def list_currencies(table: conversions.CurrencyTable = Depends(get_currency_table)):
    return {"reference": table.reference, "version": table.version, "currencies": table.currencies()}
