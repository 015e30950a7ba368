"""Prometheus metrics for transactions and rejected input"""

from prometheus_client import Counter

# Transaction metrics
transaction_counter = Counter(
    "bank_teller_transactions_total",
    "Completed deposits and withdrawals",
    ["operation", "rating"],  # deposit | withdraw, in_credit | overdrawn
)

# Input validation metrics
invalid_input_counter = Counter(
    "bank_teller_invalid_input_total",
    "Rejected customer names and amounts",
    ["field", "reason"],  # name/empty, amount/not_a_number, amount/negative
)

invalid_command_counter = Counter(
    "bank_teller_invalid_commands_total",
    "Unrecognised teller commands",
)

rejected_withdrawal_counter = Counter(
    "bank_teller_rejected_withdrawals_total",
    "Withdrawals refused because the account is already overdrawn",
)


def record_transaction(operation: str, rating: str) -> None:
    """Record a completed transaction with the rating it left the account in"""
    transaction_counter.labels(operation=operation, rating=rating).inc()
