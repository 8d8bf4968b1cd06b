from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

INVALID_BODY_MESSAGE = "invalid request body"


class LedgerError(Exception):
    pass


class InvalidUserError(LedgerError):
    pass


class InvalidAmountError(LedgerError):
    pass


def describe_validation_error(exc: RequestValidationError) -> str:
    """Collapse FastAPI validation errors into a single client message."""
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return INVALID_BODY_MESSAGE

    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if error.get("type") == "missing" and not loc:
            return INVALID_BODY_MESSAGE
        field = ".".join(loc)
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(messages) or INVALID_BODY_MESSAGE


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": describe_validation_error(exc)},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
