"""Application errors and the validation errors raised by the models."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class FirstNameBlankError(ValueError):
    """A first name was empty or only whitespace."""

    def __init__(self, message: str = "first name cannot be blank") -> None:
        super().__init__(message)


class LastNameBlankError(ValueError):
    """A last name was empty or only whitespace."""

    def __init__(self, message: str = "last name cannot be blank") -> None:
        super().__init__(message)


class AddressBlankError(ValueError):
    """An address was empty or only whitespace."""

    def __init__(self, message: str = "address cannot be blank") -> None:
        super().__init__(message)


class DataNotFoundError(LookupError):
    """No record matched the lookup."""

    def __init__(self, message: str = "data not found") -> None:
        super().__init__(message)


class DataDeletedError(Exception):
    """The record exists but has been soft-deleted."""

    def __init__(self, message: str = "data has been deleted") -> None:
        super().__init__(message)


class AppError(Exception):
    """An error that carries an HTTP status and a client-facing description."""

    def __init__(
        self,
        status_code: int,
        root_err: BaseException | None,
        message: str,
        log: str = "",
        key: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.root_err = root_err
        self.message = message
        self.log = log
        self.key = key

    def root_error(self) -> BaseException | None:
        """Follow nested application errors down to the original cause."""
        if isinstance(self.root_err, AppError):
            return self.root_err.root_error()
        return self.root_err

    def to_dict(self) -> dict[str, Any]:
        """The JSON body sent to clients; the root cause is never included."""
        return {
            "status_code": self.status_code,
            "message": self.message,
            "log": self.log,
            "error_key": self.key,
        }

    def __str__(self) -> str:
        root = self.root_error()
        return self.message if root is None else str(root)


def new_error_response(
    root: BaseException | None, msg: str, log: str, key: str
) -> AppError:
    """A Bad Request error, used for most failures."""
    return AppError(HTTPStatus.BAD_REQUEST, root, msg, log, key)


def new_full_error_response(
    status_code: int, root: BaseException | None, msg: str, log: str, key: str
) -> AppError:
    return AppError(status_code, root, msg, log, key)


def new_unauthorized_error_response(
    root: BaseException | None, msg: str, key: str
) -> AppError:
    return AppError(HTTPStatus.UNAUTHORIZED, root, msg, "", key)


def new_custom_error_response(
    root: BaseException | None, msg: str, key: str
) -> AppError:
    """A Bad Request error; without a root, the message itself becomes the root."""
    if root is not None:
        return new_error_response(root, msg, str(root), key)
    return new_error_response(Exception(msg), msg, msg, key)


def error_db(err: BaseException) -> AppError:
    return new_full_error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        err,
        "something went wrong with db",
        str(err),
        "ErrDB",
    )


def error_internal(err: BaseException) -> AppError:
    return new_full_error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        err,
        "something went wrong in the server",
        str(err),
        "ErrInternal",
    )


def error_invalid_request(err: BaseException) -> AppError:
    return new_full_error_response(
        HTTPStatus.BAD_REQUEST, err, "invalid request", str(err), "INVALID_REQUEST"
    )


def error_cannot_list_entity(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"cannot list {entity.lower()}", f"ErrorCannotList{entity}"
    )


def error_cannot_delete_entity(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"cannot delete {entity.lower()}", f"ErrorCannotDelete{entity}"
    )


def error_cannot_update_entity(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"cannot update {entity.lower()}", f"ErrorCannotUpdate{entity}"
    )


def error_cannot_get_entity(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"cannot get {entity.lower()}", f"ErrorCannotGet{entity}"
    )


def error_entity_existed(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"{entity.lower()} already exists", f"Error{entity}Existed"
    )


def error_entity_not_found(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"{entity.lower()} not found", f"Error{entity}NotFound"
    )


def error_cannot_create_entity(entity: str, err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, f"cannot create {entity.lower()}", f"ErrorCannotCreate{entity}"
    )


def error_no_permission(err: BaseException | None) -> AppError:
    return new_custom_error_response(
        err, "you have no permission to do this", "ErrorNoPermission"
    )