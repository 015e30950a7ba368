"""Account entity and its rating as overdrawn or in credit"""

import operator
from dataclasses import dataclass, replace
from typing import Callable, ClassVar, Union
from bank_teller.domain.amount import Amount
from bank_teller.domain.customer import Customer


@dataclass(frozen=True)
class Account:
    """Raw account: a customer and a balance of any sign"""

    customer: Customer
    balance: float

    def _update_balance(self, amount: Amount, op: Callable[[float, float], float]) -> "RatedAccount":
        return rate_account(replace(self, balance=op(self.balance, float(amount))))


@dataclass(frozen=True)
class CreditAccount:
    """Account known to hold a non-negative balance - the only one that can withdraw"""

    account: Account

    def __post_init__(self) -> None:
        if not self.account.balance >= 0:
            raise ValueError(f"CreditAccount requires a non-negative balance, got {self.account.balance}")

    def withdraw(self, amount: Amount) -> "RatedAccount":
        """
        Take amount out of the account and re-rate the result.

        Overdraft is allowed: withdrawing more than the balance yields an
        Overdrawn account rather than an error.
        """
        return self.account._update_balance(amount, operator.sub)


@dataclass(frozen=True)
class Overdrawn:
    """Rated account whose balance is below zero"""

    account: Account

    rating: ClassVar[str] = "overdrawn"

    def __post_init__(self) -> None:
        if self.account.balance >= 0:
            raise ValueError(f"Overdrawn requires a negative balance, got {self.account.balance}")

    def deposit(self, amount: Amount) -> "RatedAccount":
        return self.account._update_balance(amount, operator.add)


@dataclass(frozen=True)
class InCredit:
    """Rated account whose balance is zero or above"""

    credit_account: CreditAccount

    rating: ClassVar[str] = "in_credit"

    @property
    def account(self) -> Account:
        return self.credit_account.account

    def deposit(self, amount: Amount) -> "RatedAccount":
        return self.account._update_balance(amount, operator.add)


RatedAccount = Union[Overdrawn, InCredit]


def rate_account(account: Account) -> RatedAccount:
    """Classify a raw account by the sign of its balance (zero is in credit)"""
    if account.balance >= 0:
        return InCredit(CreditAccount(account))
    return Overdrawn(account)


def open_account(customer: Customer) -> RatedAccount:
    """Open a fresh account at 0.0, which always rates as in credit"""
    return rate_account(Account(customer=customer, balance=0.0))
