"""Income/expense summaries behind the profile charts and statistics.

Everything here is a pure function over an already validated, date-ordered
list of transactions. Each call builds its own buckets, so results can be
computed concurrently for different users.

Bucketing uses the calendar date of a transaction in UTC: aware timestamps
are converted to UTC first, naive ones are taken as UTC already.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from finance_tracker.models.enums import TransactionType, WeekOverflowPolicy

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEK_LABELS = ("Week 1", "Week 2", "Week 3", "Week 4")
DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class TransactionRecord(Protocol):
    amount: float
    type: str
    date: date | datetime


@dataclass
class BucketSet:
    labels: list[str]
    income: list[float]
    expenses: list[float]

    @classmethod
    def empty(cls, labels: Sequence[str]) -> BucketSet:
        return cls(
            labels=list(labels),
            income=[0.0] * len(labels),
            expenses=[0.0] * len(labels),
        )

    def add(self, index: int, transaction: TransactionRecord) -> None:
        if transaction.type == TransactionType.INCOME:
            self.income[index] += transaction.amount
        elif transaction.type == TransactionType.EXPENSE:
            self.expenses[index] += transaction.amount


@dataclass
class ChartData:
    all: BucketSet
    monthly: BucketSet
    weekly: BucketSet


@dataclass
class ProfileStats:
    total_transactions: int
    total_income: float
    total_expenses: float
    savings_rate: str


def calendar_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    return value


def _bucket(
    transactions: Iterable[TransactionRecord],
    labels: Sequence[str],
    index_of: Callable[[date], int | None],
) -> BucketSet:
    buckets = BucketSet.empty(labels)
    for transaction in transactions:
        index = index_of(calendar_date(transaction.date))
        if index is not None:
            buckets.add(index, transaction)
    return buckets


def bucket_by_month(transactions: Iterable[TransactionRecord]) -> BucketSet:
    """Sum amounts per calendar month. Years are merged into the same 12 buckets."""
    return _bucket(transactions, MONTH_LABELS, lambda day: day.month - 1)


def week_of_month_index(
    day: date, overflow: WeekOverflowPolicy = WeekOverflowPolicy.CLAMP
) -> int | None:
    """Return the "Week N" bucket for a date, ``None`` if it is dropped.

    The bucket is ``day_of_month // 7``, so days 1-6 land in "Week 1" and
    days 28-31 produce index 4, past the last bucket. ``CLAMP`` folds them
    into "Week 4", ``DROP`` leaves them out of the chart.
    """
    index = day.day // 7
    if index < len(WEEK_LABELS):
        return index
    if overflow is WeekOverflowPolicy.DROP:
        return None
    return len(WEEK_LABELS) - 1


def bucket_by_week_of_month(
    transactions: Iterable[TransactionRecord],
    overflow: WeekOverflowPolicy = WeekOverflowPolicy.CLAMP,
) -> BucketSet:
    return _bucket(
        transactions, WEEK_LABELS, lambda day: week_of_month_index(day, overflow)
    )


def bucket_by_day_of_week(transactions: Iterable[TransactionRecord]) -> BucketSet:
    # date.weekday() is already Monday-based, matching DAY_LABELS
    return _bucket(transactions, DAY_LABELS, date.weekday)


def build_chart_data(
    transactions: Sequence[TransactionRecord],
    overflow: WeekOverflowPolicy = WeekOverflowPolicy.CLAMP,
) -> ChartData:
    return ChartData(
        all=bucket_by_month(transactions),
        monthly=bucket_by_week_of_month(transactions, overflow),
        weekly=bucket_by_day_of_week(transactions),
    )


def format_savings_rate(total_income: float, total_expenses: float) -> str:
    """Savings rate as shown on the profile, e.g. ``"70.0%"``.

    Without income there is nothing to save from and the rate is a bare
    ``"0%"`` (no decimal), which existing clients rely on. Spending more
    than earned gives a negative rate.
    """
    if total_income <= 0:
        return "0%"
    rate = (total_income - total_expenses) / total_income * 100
    return f"{rate:.1f}%"


def compute_profile_stats(transactions: Iterable[TransactionRecord]) -> ProfileStats:
    total_transactions = 0
    total_income = 0.0
    total_expenses = 0.0
    for transaction in transactions:
        total_transactions += 1
        if transaction.type == TransactionType.INCOME:
            total_income += transaction.amount
        elif transaction.type == TransactionType.EXPENSE:
            total_expenses += transaction.amount
    return ProfileStats(
        total_transactions=total_transactions,
        total_income=total_income,
        total_expenses=total_expenses,
        savings_rate=format_savings_rate(total_income, total_expenses),
    )
