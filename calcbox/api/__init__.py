"""
API routes for the calculators.
"""

from fastapi import APIRouter

from calcbox.api import catalog, conversions, dates, growth, health, loans, money, travel

router = APIRouter()

# Include sub-routers
router.include_router(catalog.router, tags=["catalog"])
router.include_router(loans.router, prefix="/loans", tags=["loans"])
router.include_router(growth.router, prefix="/growth", tags=["growth"])
router.include_router(conversions.router, prefix="/conversions", tags=["conversions"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(dates.router, prefix="/dates", tags=["dates"])
router.include_router(money.router, prefix="/money", tags=["money"])
router.include_router(travel.router, prefix="/travel", tags=["travel"])
