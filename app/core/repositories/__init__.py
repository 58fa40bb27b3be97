from app.core.repositories.contact_repository import ContactMessageRepository


__all__ = ["ContactMessageRepository"]
