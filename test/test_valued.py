import pytest
from hypothesis import given
from hypothesis.strategies import builds, booleans, text, integers, none, one_of

from simple_outcome import Outcome, ValuedOutcome, NullArgumentError, InvalidArgumentError


value = 5
error_description = "failed"

valued = builds(lambda b, d, i: ValuedOutcome.success(i) if b else ValuedOutcome.fail(d),
                booleans(), text(min_size=1).filter(lambda s: s.strip()), integers())


@given(valued)
def test_invariant(r):
    assert r.is_success == (r.error_description is None)
    assert r.is_success or r.value is None
    assert isinstance(r.outcome, Outcome)


@given(one_of(integers(), none()))
def test_success(v):
    r = ValuedOutcome.success(v)
    assert r.is_success
    assert r.value == v
    assert r.error_description is None


def test_fail_without_value():
    r = ValuedOutcome[int].fail(error_description)
    assert not r.is_success
    assert r.value is None
    assert r.error_description == error_description
    assert str(r) == "failure: failed"


def test_fail_with_value():
    r = ValuedOutcome.fail(error_description, value)
    assert not r.is_success
    assert r.value == value
    assert r.error_description == error_description


@pytest.mark.parametrize("description,error", [
    (None, NullArgumentError), ("", InvalidArgumentError), ("\t ", InvalidArgumentError)])
def test_fail_bad_description(description, error):
    with pytest.raises(error):
        ValuedOutcome.fail(description)
    with pytest.raises(error):
        ValuedOutcome.fail(description, value)


@pytest.mark.parametrize("include_value", [True, False])
@pytest.mark.parametrize("condition", [lambda x: x == value, True])
def test_success_if_true(condition, include_value):
    r = ValuedOutcome[int].success_if(condition, value, error_description, include_value)
    assert r.is_success
    assert r.value == value
    assert r.error_description is None


@pytest.mark.parametrize("condition", [lambda x: x != value, False])
def test_success_if_false(condition):
    with_value = ValuedOutcome[int].success_if(condition, value, error_description, True)
    assert not with_value.is_success
    assert with_value.value == value
    assert with_value.error_description == error_description

    without_value = ValuedOutcome[int].success_if(condition, value, error_description, False)
    assert not without_value.is_success
    assert without_value.value is None
    assert without_value.error_description == error_description


def test_success_if_false_with_default():
    r = ValuedOutcome[int].success_if(lambda x: x != 5, 5, "failed", False, default=0)
    assert not r.is_success
    assert r.value == 0
    assert r.error_description == "failed"


@pytest.mark.parametrize("include_value", [True, False])
@pytest.mark.parametrize("condition", [lambda x: x != value, False])
def test_fail_if_false(condition, include_value):
    r = ValuedOutcome[int].fail_if(condition, value, error_description, include_value)
    assert r.is_success
    assert r.value == value
    assert r.error_description is None


@pytest.mark.parametrize("condition", [lambda x: x == value, True])
def test_fail_if_true(condition):
    r = ValuedOutcome[int].fail_if(condition, value, error_description, True)
    assert not r.is_success
    assert r.value == value
    assert r.error_description == error_description

    r = ValuedOutcome[int].fail_if(condition, value, error_description)
    assert not r.is_success
    assert r.value is None


@pytest.mark.parametrize("include_value", [True, False])
def test_null_predicate(include_value):
    with pytest.raises(NullArgumentError):
        ValuedOutcome[int].success_if(None, value, error_description, include_value)
    with pytest.raises(NullArgumentError):
        ValuedOutcome[int].fail_if(None, value, error_description, include_value)


def test_predicate_receives_value():
    seen = []
    ValuedOutcome.success_if(lambda x: seen.append(x) or True, "payload", error_description)
    assert seen == ["payload"]


def test_missing_status():
    with pytest.raises(NullArgumentError):
        ValuedOutcome(None, 1)  # type: ignore
