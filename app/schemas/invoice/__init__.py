from app.schemas.invoice.invoice import (
    InvoiceCreate,
    InvoiceItem,
    InvoicePayment,
    InvoiceResponse,
    InvoiceStatusUpdate,
)

__all__ = [
    "InvoiceCreate",
    "InvoiceItem",
    "InvoicePayment",
    "InvoiceResponse",
    "InvoiceStatusUpdate",
]
