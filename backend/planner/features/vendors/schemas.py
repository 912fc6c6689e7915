"""
Vendors feature: Schemas for vendor tracking.

quoted_price and amount_paid are the only numeric fields of any resource;
client input like "1,200.50" is accepted and stored as 1200.5.
"""

from typing import ClassVar

from pydantic import Field

from planner.core.schemas import Numeric, RecordBase, Text, WriteBase


class VendorRecord(RecordBase):
    """A vendor being considered or booked, with payment tracking."""
    table: ClassVar[str] = "vendors"

    category: Text = None
    name: Text = None
    contact_name: Text = Field(default=None, alias="contactName")
    phone: Text = None
    email: Text = None
    instagram: Text = None
    website: Text = None
    quoted_price: Numeric = Field(default=None, alias="quotedPrice")
    amount_paid: Numeric = Field(default=None, alias="amountPaid")
    next_payment_date: Text = Field(default=None, alias="nextPaymentDate")
    status: Text = None  # shortlisted | contacted | booked | ...
    notes: Text = None


class VendorWrite(WriteBase):
    category: Text = None
    name: Text = None
    contact_name: Text = Field(default=None, alias="contactName")
    phone: Text = None
    email: Text = None
    instagram: Text = None
    website: Text = None
    quoted_price: Numeric = Field(default=None, alias="quotedPrice")
    amount_paid: Numeric = Field(default=None, alias="amountPaid")
    next_payment_date: Text = Field(default=None, alias="nextPaymentDate")
    status: Text = None
    notes: Text = None
