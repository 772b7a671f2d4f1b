"""Single-step reduction strategies (call-by-name, normal order)."""

from .beta import beta_contract, is_redex
from .call_by_name import call_by_name_reduce
from .normal_order import normal_order_reduce

__all__ = [
    "beta_contract",
    "call_by_name_reduce",
    "is_redex",
    "normal_order_reduce",
]
