from app.infrastructure.middleware.cors import OriginPolicyCORSMiddleware, is_origin_allowed
from app.infrastructure.middleware.request_logging import LoggingMiddleware


__all__ = ["LoggingMiddleware", "OriginPolicyCORSMiddleware", "is_origin_allowed"]
