from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from finance_tracker.models.base import BaseModel
from finance_tracker.models.enums import TransactionType


class Transaction(BaseModel):
    __tablename__ = "transactions"

    name: Mapped[str]
    amount: Mapped[float]
    type: Mapped[TransactionType]
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
