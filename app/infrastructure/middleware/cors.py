from collections.abc import Sequence

from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


def is_origin_allowed(
    origin: str | None,
    allowed_origins: Sequence[str],
    allowed_suffixes: Sequence[str],
) -> bool:
    # без Origin приходят same-origin запросы, curl и server-to-server
    if not origin:
        return True
    if origin in allowed_origins:
        return True
    return any(origin.endswith(suffix) for suffix in allowed_suffixes)


class OriginPolicyCORSMiddleware(CORSMiddleware):
    """CORS со списком разрешённых origin и суффиксами доменов деплоя.

    Запросы с неразрешённым Origin отклоняются с 403, а не просто
    остаются без CORS-заголовков.
    """

    def __init__(
        self,
        app: ASGIApp,
        allowed_origins: Sequence[str] = (),
        allowed_suffixes: Sequence[str] = (),
    ):
        super().__init__(
            app,
            allow_origins=list(allowed_origins),
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
            allow_credentials=True,
        )
        self.allowed_origins = list(allowed_origins)
        self.allowed_suffixes = list(allowed_suffixes)

    def is_allowed_origin(self, origin: str) -> bool:
        return is_origin_allowed(origin, self.allowed_origins, self.allowed_suffixes)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = None
            for key, value in scope["headers"]:
                if key == b"origin":
                    origin = value.decode("latin-1")
                    break

            if origin and not self.is_allowed_origin(origin):
                logger.warning("cors_origin_rejected", origin=origin, path=scope.get("path"))
                response = JSONResponse(
                    status_code=403,
                    content={"message": "Not allowed by CORS"},
                )
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)
