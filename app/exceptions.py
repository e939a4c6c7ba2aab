from dataclasses import dataclass
from typing import Any, Iterable, List


@dataclass(frozen=True)
class ConstraintViolation:
    """A single failed constraint on a request property.

    Attributes:
        property_path: dotted path of the offending property (e.g. ``beerName``)
        message: human-readable message (e.g. ``must not be blank``)
        invalid_value: the value that failed the check
    """

    property_path: str
    message: str
    invalid_value: Any = None


class ConstraintViolationError(Exception):
    """Raised when request data fails one or more declared constraints.

    Translated into HTTP 400 with a list of ``"<path> <message>"`` strings.
    """

    http_status = 400

    def __init__(self, violations: Iterable[ConstraintViolation]):
        self.violations: List[ConstraintViolation] = list(violations)
        super().__init__(
            "; ".join(f"{v.property_path} {v.message}" for v in self.violations)
        )


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes:
        message: human-readable message
        http_status: suggested HTTP status code for handlers (404)
    """

    http_status = 404
    code = "NOT_FOUND"

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return self.message
