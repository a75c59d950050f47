"""
Catalog and favorites endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from calcbox import catalog
from calcbox.favorites import FavoritesStore, InMemoryFavoritesStore

router = APIRouter()

_store = InMemoryFavoritesStore()


def get_favorites_store() -> FavoritesStore:
    """Favorites store dependency; override in tests or per deployment."""
    return _store


class CalculatorOut(BaseModel):
    id: str
    name: str
    description: str
    category: catalog.Category
    favorite: bool = False
    rating: Optional[int] = None


class RatingInput(BaseModel):
    stars: int = Field(ge=1, le=5)


def _known(calculator_id: str) -> catalog.CalculatorInfo:
    try:
        return catalog.get(calculator_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {calculator_id}")


def _out(calc: catalog.CalculatorInfo, store: FavoritesStore) -> CalculatorOut:
    return CalculatorOut(
        id=calc.id,
        name=calc.name,
        description=calc.description,
        category=calc.category,
        favorite=store.is_favorite(calc.id),
        rating=store.rating(calc.id),
    )


@router.get("/catalog", response_model=List[CalculatorOut])
async def list_calculators(
    q: str = "",
    category: Optional[catalog.Category] = None,
    store: FavoritesStore = Depends(get_favorites_store),
):
    """Search the catalog by name/description, optionally within a category."""
    return [_out(calc, store) for calc in catalog.search(q, category)]


@router.get("/favorites", response_model=List[CalculatorOut])
async def list_favorites(store: FavoritesStore = Depends(get_favorites_store)):
    return [_out(catalog.get(calc_id), store) for calc_id in store.list()]


@router.post("/favorites/{calculator_id}", response_model=CalculatorOut)
async def toggle_favorite(calculator_id: str, store: FavoritesStore = Depends(get_favorites_store)):
    """Star or unstar a calculator."""
    calc = _known(calculator_id)
    store.toggle(calc.id)
    return _out(calc, store)


@router.post("/ratings/{calculator_id}", response_model=CalculatorOut)
async def rate_calculator(
    calculator_id: str,
    inputs: RatingInput,
    store: FavoritesStore = Depends(get_favorites_store),
):
    calc = _known(calculator_id)
    store.rate(calc.id, inputs.stars)
    return _out(calc, store)
