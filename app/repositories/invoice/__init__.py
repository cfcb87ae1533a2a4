from app.repositories.invoice.invoice_repository import InvoiceRepository

__all__ = ["InvoiceRepository"]
