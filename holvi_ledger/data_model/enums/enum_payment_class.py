from enum import Enum
from typing import Any, Tuple


class PaymentClass(Enum):
    """
    Enum representing the direction of money in a bank export row.
    """
    EXPENSE = "expense"
    INCOME = "income"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)


def is_payment_class(value: Any) -> bool:
    return value in PaymentClass.values()
