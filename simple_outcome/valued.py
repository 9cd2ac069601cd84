from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from .combinators import combine, combine_short_circuit, evaluate
from .errors import NullArgumentError, require
from .outcome import Outcome


T = TypeVar("T")

ValueCondition = Union[bool, Callable[[T], bool]]


@dataclass(frozen=True)
class ValuedOutcome(Generic[T]):
    """An `Outcome` that also carries a value.

    On success `value` is whatever was given to `success`, `None` included.
    A failure only carries a value when one was attached explicitly;
    otherwise `value` is `None`, or the `default` passed to one of the
    conditional factories.
    """
    status: Outcome
    value: Optional[T] = None

    def __post_init__(self):
        require(self.status, "status")

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    @property
    def error_description(self) -> Optional[str]:
        return self.status.error_description

    @property
    def outcome(self) -> Outcome:
        return self.status

    @classmethod
    def success(cls, value: T) -> ValuedOutcome[T]:
        return cls(Outcome.success(), value)

    @classmethod
    def fail(cls, error_description: str, value: Optional[T] = None) -> ValuedOutcome[T]:
        return cls(Outcome.fail(error_description), value)

    @classmethod
    def success_if(
        cls,
        predicate: ValueCondition[T],
        value: T,
        error_description: str,
        include_value_in_fail: bool = False,
        default: Optional[T] = None,
    ) -> ValuedOutcome[T]:
        """Succeed with `value` when `predicate(value)` holds. On failure
        the value slot holds `value` if `include_value_in_fail` is set and
        `default` otherwise."""
        if evaluate(predicate, "predicate", value):
            return cls.success(value)
        return cls.fail(error_description, value if include_value_in_fail else default)

    @classmethod
    def fail_if(
        cls,
        negative_predicate: ValueCondition[T],
        value: T,
        error_description: str,
        include_value_in_fail: bool = False,
        default: Optional[T] = None,
    ) -> ValuedOutcome[T]:
        if evaluate(negative_predicate, "negative_predicate", value):
            return cls.fail(error_description, value if include_value_in_fail else default)
        return cls.success(value)

    def __bool__(self):
        return self.is_success

    def __str__(self):
        if self.is_success:
            return f"success: {self.value!r}"
        return f"failure: {self.error_description}"

    def and_(self, other: ValuedOutcome[T]) -> ValuedOutcome[T]:
        return combine(self, other, False)

    def or_(self, other: ValuedOutcome[T]) -> ValuedOutcome[T]:
        return combine(self, other, True)

    def and_short_circuit(
        self, other: Union[ValuedOutcome[T], Callable[[], ValuedOutcome[T]]]
    ) -> ValuedOutcome[T]:
        return combine_short_circuit(self, other, False)

    def or_short_circuit(
        self, other: Union[ValuedOutcome[T], Callable[[], ValuedOutcome[T]]]
    ) -> ValuedOutcome[T]:
        return combine_short_circuit(self, other, True)

    def __and__(self, other):
        if other is not None and not isinstance(other, (ValuedOutcome, Outcome)):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if other is not None and not isinstance(other, (ValuedOutcome, Outcome)):
            return NotImplemented
        return self.or_(other)

    # `Outcome & ValuedOutcome` lands here; the plain outcome stays the left operand.
    def __rand__(self, other):
        if other is None:
            raise NullArgumentError("self")
        if not isinstance(other, Outcome):
            return NotImplemented
        return combine(other, self, False)

    def __ror__(self, other):
        if other is None:
            raise NullArgumentError("self")
        if not isinstance(other, Outcome):
            return NotImplemented
        return combine(other, self, True)
