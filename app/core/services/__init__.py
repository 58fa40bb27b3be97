from app.core.services.contact_service import ContactService


__all__ = ["ContactService"]
