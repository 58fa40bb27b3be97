import uvicorn

from app.infrastructure.config.config import APP_CONFIG


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=APP_CONFIG.HOST,
        port=APP_CONFIG.PORT,
        reload=APP_CONFIG.DEBUG,
        log_config=None,
    )
