"""Application errors and their JSON representation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationErrorItem:
    """One failed field check, as reported to the client."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule on a request field."""

    field: str
    tag: str
    param: str = ""
    namespace: str = ""

    def __str__(self) -> str:
        return (
            f"Key: '{self.namespace or self.field}' Error:Field validation for "
            f"'{self.field}' failed on the '{self.tag}' tag"
        )


class AppError(Exception):
    """An error carrying the HTTP status it should be answered with."""

    def __init__(self, message: str, status: int, errors: Iterable[ValidationErrorItem] = ()):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = list(errors)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        body = {"status": self.status, "message": self.message}
        if self.errors:
            body["errors"] = [item.to_dict() for item in self.errors]
        return body


def not_found_error(message: str) -> AppError:
    return AppError(message, 404)


def unexpected_error(message: str) -> AppError:
    return AppError(message, 500)


def validation_error(items: Iterable[ValidationErrorItem]) -> AppError:
    return AppError("validation error", 422, items)


def validation_message(field_error: FieldError) -> str:
    """Return the client-facing message for a failed field check."""
    field, param = field_error.field, field_error.param
    match field_error.tag:
        case "required":
            return f"{field} is required"
        case "email":
            return "invalid email format"
        case "min":
            return f"{field} must be at least {param}"
        case "max":
            return f"{field} must be at most {param}"
        case _:
            return str(field_error)


def parse_validation_errors(field_errors) -> AppError:
    """Turn failed field checks into a 422 error; an exception into a 500."""
    if isinstance(field_errors, BaseException):
        return unexpected_error(str(field_errors))
    return validation_error(
        ValidationErrorItem(fe.field, validation_message(fe)) for fe in field_errors
    )


def handle_error(err: BaseException) -> tuple[int, dict]:
    """Return the status code and JSON body answering ``err``."""
    if not isinstance(err, AppError):
        err = unexpected_error(str(err))
    return err.status, err.to_dict()