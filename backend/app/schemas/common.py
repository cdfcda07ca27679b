from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str


def error_response(message: str) -> dict:
    return ErrorResponse(error=message).model_dump()
