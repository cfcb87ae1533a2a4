from app.services.invoice.invoice_service import InvoiceService

__all__ = ["InvoiceService"]
