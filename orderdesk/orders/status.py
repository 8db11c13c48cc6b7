"""Order fulfillment states.

The vocabulary is fixed and matched case-sensitively. Any state may follow any
other; only membership is enforced.
"""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PREPARATION = "InPreparation"
    READY = "Ready"


INITIAL_STATUS = OrderStatus.PENDING
