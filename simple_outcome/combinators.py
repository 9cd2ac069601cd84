"""Selection rules shared by `Outcome` and `ValuedOutcome`.

Every combinator picks one of its operands and hands it back as is; nothing
here builds a new outcome. The rule is the same for both outcome shapes:
keep the left operand when its success flag equals the target truth value,
otherwise take the right one. AND looks for the first failure (target
`False`), OR for the first success (target `True`).
"""
from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Protocol, TypeVar, Union

from .errors import InvalidArgumentError, NullArgumentError, require
from .logging import logger


log = logger()


class HasSuccess(Protocol):
    @property
    def is_success(self) -> bool: ...


O = TypeVar("O", bound=HasSuccess)
Operand = Union[O, Callable[[], O]]
Condition = Union[bool, Callable[[], bool]]


def combine(left: O, right: O, target: bool) -> O:
    require(left, "self")
    require(right, "other")
    return left if left.is_success == target else right


def combine_short_circuit(left: O, right: Operand[O], target: bool) -> O:
    """Like `combine`, but `right` is only looked at when `left` does not
    settle the result already. `right` may be a zero-argument callable, in
    which case it is called at most once."""
    require(left, "self")
    if left.is_success == target:
        log.debug(f"short circuit: left operand settles `{target}`, right operand skipped")
        return left
    if right is not None and callable(right):
        right = right()
    return combine(left, right, target)


def all_of(*outcomes: O) -> O:
    if not outcomes:
        raise InvalidArgumentError("outcomes", "at least one outcome is required.")
    return reduce(lambda a, b: combine(a, b, False), outcomes)


def any_of(*outcomes: O) -> O:
    if not outcomes:
        raise InvalidArgumentError("outcomes", "at least one outcome is required.")
    return reduce(lambda a, b: combine(a, b, True), outcomes)


def evaluate(condition: Union[bool, Callable[..., bool], None], name: str, *args: Any) -> bool:
    if isinstance(condition, bool):
        return condition
    if condition is None:
        raise NullArgumentError(name)
    return bool(condition(*args))
