from dataclasses import dataclass
from typing import Any, Optional


class OutcomeError(Exception):
    def __str__(self):
        return "Unknown outcome error."


@dataclass
class NullArgumentError(OutcomeError, TypeError):
    argument: str

    def __str__(self):
        return f"Argument `{self.argument}` must not be None."


@dataclass
class InvalidArgumentError(OutcomeError, ValueError):
    argument: str
    reason: str

    def __str__(self):
        return f"Argument `{self.argument}` is invalid: {self.reason}"


def require(value: Any, name: str) -> Any:
    if value is None:
        raise NullArgumentError(name)
    return value


def require_description(description: Optional[str], name: str = "error_description") -> str:
    require(description, name)
    if not isinstance(description, str):
        raise InvalidArgumentError(name, f"expected a string, got {type(description).__name__}.")
    if not description.strip():
        raise InvalidArgumentError(name, "error description cannot be empty.")
    return description
