"""Account state computation - produces the next account for each teller command"""

import logging
from typing import Protocol
from bank_teller.domain.account import CreditAccount, RatedAccount, open_account
from bank_teller.domain.amount import Amount
from bank_teller.domain.customer import Customer
from bank_teller.infrastructure.observability.logging import log_transaction
from bank_teller.infrastructure.observability.metrics import record_transaction

logger = logging.getLogger(__name__)


class Computer(Protocol):
    """Computes account states; knows nothing about how the teller talks to the customer"""

    def get_account(self, customer: Customer) -> RatedAccount: ...

    def deposit(self, amount: Amount, account: RatedAccount) -> RatedAccount: ...

    def withdraw(self, amount: Amount, account: CreditAccount) -> RatedAccount: ...


class LiveComputer:
    """Computer backed by the in-process domain model"""

    def get_account(self, customer: Customer) -> RatedAccount:
        account = open_account(customer)
        logger.info("Account opened", extra={"customer": str(customer)})
        return account

    def deposit(self, amount: Amount, account: RatedAccount) -> RatedAccount:
        new_account = account.deposit(amount)
        self._record("deposit", account.account.balance, new_account)
        return new_account

    def withdraw(self, amount: Amount, account: CreditAccount) -> RatedAccount:
        new_account = account.withdraw(amount)
        self._record("withdraw", account.account.balance, new_account)
        return new_account

    def _record(self, operation: str, balance_before: float, new_account: RatedAccount) -> None:
        record_transaction(operation, new_account.rating)
        log_transaction(
            operation,
            str(new_account.account.customer),
            balance_before,
            new_account.account.balance,
            new_account.rating,
        )
