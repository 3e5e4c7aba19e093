# /readme_service/utils/errors.py
# Application errors carry the HTTP status they should be reported with.
from dataclasses import dataclass


@dataclass
class AppError(Exception):
    status_code: int
    message: str

    def __str__(self) -> str:
        return self.message


# malformed repository reference, e.g. "acme" or "acme/widget/extra"
def invalid_reference(msg: str = "Invalid GitHub repository URL") -> AppError:
    return AppError(400, msg)


# raised when the client sends a bad request, e.g. missing required fields
def validation_error(msg: str) -> AppError:
    return AppError(400, msg)


def not_found(msg: str) -> AppError:
    return AppError(404, msg)


def rate_limited(msg: str) -> AppError:
    return AppError(429, msg)


def upstream_error(msg: str) -> AppError:
    return AppError(500, msg)


def missing_credential(msg: str) -> AppError:
    return AppError(503, msg)


def provider_error(msg: str) -> AppError:
    return AppError(500, msg)


# Fallback for exceptions that are not AppError: classify by message text.
MESSAGE_STATUS_RULES = (
    ("not found", 404),
    ("rate limit", 429),
    ("Invalid", 400),
    ("GEMINI_API_KEY", 503),
)


def status_for_message(message: str) -> int:
    for needle, status in MESSAGE_STATUS_RULES:
        if needle in message:
            return status
    return 500
