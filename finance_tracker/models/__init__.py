from .base import BaseModel
from .enums import TransactionType
from .user import User
from .transaction import Transaction

__all__ = [
    "BaseModel",
    "TransactionType",
    "User",
    "Transaction",
]
