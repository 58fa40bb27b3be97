from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException

from app.api.routers import api_routers
from app.infrastructure.config.config import APP_CONFIG, DB_CONFIG, EMAIL_CONFIG
from app.infrastructure.database.adapters.pg_connection import DatabaseConnection
from app.infrastructure.email.sender import build_email_sender
from app.infrastructure.logging.logger import configure_logging, get_logger
from app.infrastructure.middleware import LoggingMiddleware, OriginPolicyCORSMiddleware


configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app):
    logger.info("application_startup", app_name=APP_CONFIG.APP_NAME, debug=APP_CONFIG.DEBUG)

    db_connection = DatabaseConnection()
    if db_connection.is_configured and DB_CONFIG.DB_CREATE_TABLES:
        try:
            await db_connection.create_tables()
            logger.info("database_connected")
        except Exception as exc:
            # без базы сервис всё равно стартует, запись упадёт уже на запросе
            logger.warning("database_init_failed", error=str(exc))
    app.state.db_connection = db_connection

    if not EMAIL_CONFIG.admin_email:
        logger.warning("admin_email_not_configured")
    app.state.email_sender = build_email_sender(EMAIL_CONFIG)

    yield

    await db_connection.dispose()
    logger.info("application_shutdown")


app = FastAPI(
    title=APP_CONFIG.APP_NAME,
    debug=APP_CONFIG.DEBUG,
    lifespan=lifespan
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request payload"},
    )


app.add_middleware(
    OriginPolicyCORSMiddleware,
    allowed_origins=APP_CONFIG.allowed_origins,
    allowed_suffixes=APP_CONFIG.allowed_origin_suffixes,
)

app.add_middleware(LoggingMiddleware)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Backend is running!"


app.include_router(api_routers)
