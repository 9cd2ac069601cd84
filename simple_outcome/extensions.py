"""Chaining helpers on top of the `Outcome` factories.

`then_*` only look at a new condition while everything so far succeeded,
`otherwise_*` only while it failed. An outcome that is passed through is
returned unchanged and its predicate is never called.
"""
from __future__ import annotations

from .combinators import Condition
from .errors import require
from .logging import logger
from .outcome import Outcome


log = logger()


def then_if(outcome: Outcome, predicate: Condition, error_description: str) -> Outcome:
    require(outcome, "outcome")
    if not outcome.is_success:
        log.debug(f"`then_if` passes through {outcome}")
        return outcome
    return Outcome.success_if(predicate, error_description)


def then_fail_if(outcome: Outcome, negative_predicate: Condition, error_description: str) -> Outcome:
    require(outcome, "outcome")
    if not outcome.is_success:
        log.debug(f"`then_fail_if` passes through {outcome}")
        return outcome
    return Outcome.fail_if(negative_predicate, error_description)


def otherwise_if(outcome: Outcome, predicate: Condition, error_description: str) -> Outcome:
    require(outcome, "outcome")
    if outcome.is_success:
        log.debug(f"`otherwise_if` passes through {outcome}")
        return outcome
    return Outcome.success_if(predicate, error_description)


def otherwise_fail_if(outcome: Outcome, negative_predicate: Condition, error_description: str) -> Outcome:
    require(outcome, "outcome")
    if outcome.is_success:
        log.debug(f"`otherwise_fail_if` passes through {outcome}")
        return outcome
    return Outcome.fail_if(negative_predicate, error_description)
