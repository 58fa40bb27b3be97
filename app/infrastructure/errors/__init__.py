from app.infrastructure.errors.base import NotificationError, PersistenceError, ValidationError


__all__ = ["NotificationError", "PersistenceError", "ValidationError"]
