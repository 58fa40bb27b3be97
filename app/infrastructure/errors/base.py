from fastapi import HTTPException, status


class ValidationError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "All fields are required"

    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )


class PersistenceError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal Server Error: Failed to save message."

    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )


class NotificationError(HTTPException):
    """Одна или несколько отправок письма завершились ошибкой.

    Запись к этому моменту уже сохранена, поэтому ошибка не откатывает её.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Message saved, but notification emails could not be sent."

    def __init__(
        self,
        detail: str | None = None,
        recipient: str | None = None,
        reason: str | None = None,
    ):
        self.recipient = recipient
        self.reason = reason
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )
