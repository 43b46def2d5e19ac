from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    ISSUED = "ISSUED"
    CANCELLED = "CANCELLED"


class _InvoiceModel(BaseModel):
    # JSON payloads use camelCase, Python callers use field names
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )


class InvoiceLine(_InvoiceModel):
    name: str = ""
    description: str = ""
    quantity: Decimal = Decimal("0")
    unit_price: Decimal = Decimal("0")
    vat_rate: Decimal = Decimal("0")

    @field_validator("name", "description", mode="before")
    @classmethod
    def text_or_empty(cls, value):
        return "" if value is None else value

    @field_validator("quantity", "unit_price", "vat_rate", mode="before")
    @classmethod
    def number_or_zero(cls, value):
        return 0 if value is None or value == "" else value

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price

    @property
    def vat_amount(self) -> Decimal:
        return self.line_total * self.vat_rate / Decimal("100")


class Invoice(_InvoiceModel):
    invoice_number: str = ""
    invoice_date: str = ""
    due_date: Optional[str] = None
    customer_name: str = ""
    customer_address: str = ""
    tax_office: str = ""
    tax_number: str = ""
    currency: str = "USD"
    status: InvoiceStatus = InvoiceStatus.DRAFT
    line_items: List[InvoiceLine] = Field(default_factory=list)
    notes: str = ""

    @field_validator(
        "invoice_number",
        "invoice_date",
        "customer_name",
        "customer_address",
        "tax_office",
        "tax_number",
        "notes",
        mode="before",
    )
    @classmethod
    def text_or_empty(cls, value):
        if value is None:
            return ""
        if isinstance(value, date):
            return value.isoformat()
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def date_as_text(cls, value):
        if isinstance(value, date):
            return value.isoformat()
        return value

    @field_validator("line_items", mode="before")
    @classmethod
    def items_or_empty(cls, value):
        return [] if value is None else value
