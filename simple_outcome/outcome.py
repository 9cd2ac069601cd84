from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .combinators import Condition, combine, combine_short_circuit, evaluate
from .errors import InvalidArgumentError, NullArgumentError, require_description


@dataclass(frozen=True)
class Outcome:
    """Success or failure of an operation, without a payload.

    A failed outcome always carries a non-blank `error_description`; a
    successful one never does. Instances are immutable, so combinators
    return one of their operands rather than a copy.

    `bool(outcome)` is `outcome.is_success`. Together with the `&` and `|`
    operators this lets outcomes be chained like booleans:

        >>> first = Outcome.fail("first")
        >>> (first & Outcome.success()) is first
        True

    Python's `and`/`or` keywords return the same operand as
    `and_short_circuit` / `or_short_circuit` and never evaluate the right
    hand side when the left one decides the result.
    """
    is_success: bool
    error_description: Optional[str] = None

    def __post_init__(self):
        if self.is_success:
            if self.error_description is not None:
                raise InvalidArgumentError(
                    "error_description", "a successful outcome has no error description.")
        else:
            require_description(self.error_description)

    @classmethod
    def success(cls) -> Outcome:
        return cls(True)

    @classmethod
    def fail(cls, error_description: str) -> Outcome:
        return cls(False, error_description)

    @classmethod
    def success_if(cls, predicate: Condition, error_description: str) -> Outcome:
        """Succeed when `predicate` holds, fail with `error_description`
        otherwise. `predicate` is either a `bool` or a callable taking no
        arguments; the description is only validated on failure."""
        if evaluate(predicate, "predicate"):
            return cls.success()
        return cls.fail(error_description)

    @classmethod
    def fail_if(cls, negative_predicate: Condition, error_description: str) -> Outcome:
        if evaluate(negative_predicate, "negative_predicate"):
            return cls.fail(error_description)
        return cls.success()

    def __bool__(self):
        return self.is_success

    def __str__(self):
        if self.is_success:
            return "success"
        return f"failure: {self.error_description}"

    def and_(self, other: Outcome) -> Outcome:
        return combine(self, other, False)

    def or_(self, other: Outcome) -> Outcome:
        return combine(self, other, True)

    def and_short_circuit(self, other: Union[Outcome, Callable[[], Outcome]]) -> Outcome:
        return combine_short_circuit(self, other, False)

    def or_short_circuit(self, other: Union[Outcome, Callable[[], Outcome]]) -> Outcome:
        return combine_short_circuit(self, other, True)

    def __and__(self, other):
        if other is not None and not isinstance(other, Outcome):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if other is not None and not isinstance(other, Outcome):
            return NotImplemented
        return self.or_(other)

    def __rand__(self, other):
        if other is None:
            raise NullArgumentError("self")
        return NotImplemented

    def __ror__(self, other):
        if other is None:
            raise NullArgumentError("self")
        return NotImplemented

    def then_if(self, predicate: Condition, error_description: str) -> Outcome:
        return extensions.then_if(self, predicate, error_description)

    def then_fail_if(self, negative_predicate: Condition, error_description: str) -> Outcome:
        return extensions.then_fail_if(self, negative_predicate, error_description)

    def otherwise_if(self, predicate: Condition, error_description: str) -> Outcome:
        return extensions.otherwise_if(self, predicate, error_description)

    def otherwise_fail_if(self, negative_predicate: Condition, error_description: str) -> Outcome:
        return extensions.otherwise_fail_if(self, negative_predicate, error_description)


from . import extensions  # noqa: E402
