"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers.  When new endpoints
are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import greeting

router = APIRouter()

# The greeting router defines its own "/greeting" path internally.  Do not
# specify a prefix here or the endpoint would appear under ``/greeting/greeting``.
router.include_router(greeting.router, tags=["greeting"])
