"""
Vendors feature: API routes for vendor tracking.
"""

from planner.core.resource import build_resource_router
from planner.features.vendors.service import VendorsService

router = build_resource_router(VendorsService)
