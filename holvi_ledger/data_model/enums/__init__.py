# holvi_ledger/data_model/enums/__init__.py
"""
Closed enumerations used to classify bank export rows.
"""

from .enum_category import Category, is_category
from .enum_payment_class import PaymentClass, is_payment_class
from .enum_payment_subclass import PaymentSubclass, is_payment_subclass

__all__ = [
    "Category",
    "PaymentClass",
    "PaymentSubclass",
    "is_category",
    "is_payment_class",
    "is_payment_subclass",
]
