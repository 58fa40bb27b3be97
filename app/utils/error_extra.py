from fastapi import HTTPException

from app.core.dto.contact import MessageResponseModel


def error_response(*errors: type[HTTPException]) -> dict:
    responses: dict = {}
    for error in errors:
        responses.setdefault(
            error.status_code,
            {"model": MessageResponseModel, "description": error.detail},
        )
    return responses
