"""Log-space probability math and sentence ranking."""

from .log_math import (
    exp_normalize,
    log_dot,
    log_fuzzy_or,
    log_fuzzy_or_all,
    log_sum_exp,
    log_sum_exp_all,
    log_sum_exp_normalize,
)
from .probability import ProbabilityScorer

__all__ = [
    "ProbabilityScorer",
    "exp_normalize",
    "log_dot",
    "log_fuzzy_or",
    "log_fuzzy_or_all",
    "log_sum_exp",
    "log_sum_exp_all",
    "log_sum_exp_normalize",
]
