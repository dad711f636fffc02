# page_assistant/core/errors.py
from typing import Optional


class AssistantError(Exception):
    """
    Base class for failures the ask pipeline reports back to the caller.

    `message` is the human-readable text put in the `error` field of the
    response; `details` carries the raw detail string.
    """
    message = "Server error"

    def __init__(self, details: str = "", message: Optional[str] = None):
        if message is not None:
            self.message = message
        self.details = details
        super().__init__(details or self.message)


class QuestionValidationError(AssistantError):
    message = "Question must be a non-empty string"


class MissingCredentialError(AssistantError):
    message = "LLM API key is not configured"


class InvalidCredentialError(AssistantError):
    message = "LLM API key is invalid or has expired, check the API key in your .env file"


class RateLimitedOrQuotaExhaustedError(AssistantError):
    message = "LLM API is rate limited or the quota is exhausted, please try again later"


class UpstreamServerError(AssistantError):
    message = "LLM provider server error, please try again later"


class UpstreamCallFailedError(AssistantError):
    message = "LLM API call failed"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(details=f"HTTP {status_code}: {body}")


def error_for_status(status_code: int, body: str) -> AssistantError:
    """Maps an upstream HTTP status to the matching domain error."""
    if status_code == 401:
        return InvalidCredentialError(details=body)
    if status_code == 429:
        return RateLimitedOrQuotaExhaustedError(details=body)
    if status_code == 500:
        return UpstreamServerError(details=body)
    return UpstreamCallFailedError(status_code, body)
