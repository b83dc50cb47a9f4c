#!/usr/bin/env python3
"""Create the database schema and a demo user with a couple of transactions."""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import UTC, datetime

from sqlalchemy import or_, select

from finance_tracker.core.db import create_tables, new_engine, new_session_maker
from finance_tracker.models import Transaction, TransactionType, User
from finance_tracker.services.providers.password_encoder import BcryptPasswordEncoder
from finance_tracker.settings.db import DatabaseSettings

LOGGER = logging.getLogger("seed")

SAMPLE_TRANSACTIONS = [
    ("Monthly Salary", 5_000_000.0, TransactionType.INCOME, datetime(2024, 3, 15, tzinfo=UTC)),
    ("Monthly Shopping", 1_500_000.0, TransactionType.EXPENSE, datetime(2024, 3, 16, tzinfo=UTC)),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the finance tracker database.")
    parser.add_argument("--username", default="demo", help="Demo user login.")
    parser.add_argument("--password", default="demo123", help="Demo user password.")
    parser.add_argument("--email", default="demo@example.com", help="Demo user email.")
    parser.add_argument("--name", default="Demo User", help="Demo user display name.")
    return parser.parse_args()


async def seed(args: argparse.Namespace) -> None:
    engine = new_engine(DatabaseSettings())
    try:
        await create_tables(engine)
        session_maker = new_session_maker(engine)
        async with session_maker() as session:
            user = await session.scalar(
                select(User).where(
                    or_(User.username == args.username, User.email == args.email)
                )
            )
            if user is not None:
                LOGGER.info("User %s already exists, nothing to do", user.username)
                return

            user = User(
                username=args.username,
                email=args.email,
                name=args.name,
                password=BcryptPasswordEncoder().hash_password(args.password),
            )
            session.add(user)
            await session.flush()
            session.add_all(
                Transaction(name=name, amount=amount, type=type_, date=date, user_id=user.id)
                for name, amount, type_, date in SAMPLE_TRANSACTIONS
            )
            await session.commit()
            LOGGER.info(
                "Created user %s with %d transactions",
                user.username,
                len(SAMPLE_TRANSACTIONS),
            )
    finally:
        await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed(parse_args()))


if __name__ == "__main__":
    main()
