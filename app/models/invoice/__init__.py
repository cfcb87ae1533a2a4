from app.models.invoice.invoice import Invoice

__all__ = ["Invoice"]
