from enum import Enum
from typing import Any, Tuple


class Category(Enum):
    """
    Enum representing the bookkeeping category tagged on a bank export row.

    Values are the labels the bank writes into the export, so they are Finnish.
    The set is closed: an unknown label is a validation failure.
    """
    SERVICE_FEE = "Palvelumaksut"
    MEMBERSHIP_FEE = "Jäsenmaksu"
    MERCHANDISE = "Myyntiartikkelit"
    GENERAL_EXPENSE = "Yleiset menot"
    LANPARTY = "Lanit"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)


def is_category(value: Any) -> bool:
    return value in Category.values()
