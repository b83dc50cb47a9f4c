from enum import StrEnum


class TransactionType(StrEnum):
    INCOME = 'income'
    EXPENSE = 'expense'


class WeekOverflowPolicy(StrEnum):
    CLAMP = 'clamp'
    DROP = 'drop'
