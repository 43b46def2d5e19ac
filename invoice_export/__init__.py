from .models import Invoice, InvoiceLine, InvoiceStatus
from .services.invoice_pdf import encode

__all__ = ["Invoice", "InvoiceLine", "InvoiceStatus", "encode"]
