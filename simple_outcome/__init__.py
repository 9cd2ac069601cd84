from .outcome import Outcome
from .valued import ValuedOutcome
from .combinators import combine, combine_short_circuit, all_of, any_of
from .extensions import then_if, then_fail_if, otherwise_if, otherwise_fail_if
from .errors import OutcomeError, NullArgumentError, InvalidArgumentError
from .logging import configure_logger
from .version import __version__

__all__ = [
    "Outcome", "ValuedOutcome", "combine", "combine_short_circuit", "all_of", "any_of",
    "then_if", "then_fail_if", "otherwise_if", "otherwise_fail_if",
    "OutcomeError", "NullArgumentError", "InvalidArgumentError", "configure_logger",
    "__version__",
]
