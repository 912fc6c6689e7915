"""
Vendors feature: Service layer for vendor tracking.
"""

from typing import Any

from planner.core.resource import ResourceService
from planner.features.vendors.schemas import VendorRecord, VendorWrite

DEFAULT_STATUS = "shortlisted"


class VendorsService(ResourceService):
    """Vendors, filterable by status and category."""

    record_model = VendorRecord
    write_model = VendorWrite
    filters = ("status", "category")

    def apply_create_defaults(self, columns: dict[str, Any]) -> dict[str, Any]:
        if not columns.get("status"):
            columns["status"] = DEFAULT_STATUS
        return columns
