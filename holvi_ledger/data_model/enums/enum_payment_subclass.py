from enum import Enum
from typing import Any, Tuple


class PaymentSubclass(Enum):
    """
    Enum representing how a payment was made.
    """
    OUTBOUND_PAYMENT = "outboundpayment"
    ORDER = "order"  # webshop order
    IBAN_PAYMENT = "iban_payment"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)


def is_payment_subclass(value: Any) -> bool:
    return value in PaymentSubclass.values()
