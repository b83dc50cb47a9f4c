from sqlalchemy.orm import Mapped, mapped_column

from finance_tracker.models.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(unique=True)
    email: Mapped[str] = mapped_column(unique=True)
    name: Mapped[str]

    password: Mapped[str]
    profile_image: Mapped[str | None] = mapped_column(nullable=True)
