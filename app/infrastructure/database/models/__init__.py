from .base import Base
from .contact_message import ContactMessage


__all__ = [
    "Base",
    "ContactMessage",
]
