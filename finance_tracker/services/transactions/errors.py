from finance_tracker.services.errors import NotFoundError


class TransactionNotFound(NotFoundError):
    detail = "Transaction not found"
