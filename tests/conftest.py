"""Pytest fixtures for testing"""

import pytest
from typing import Callable, List
from bank_teller.app.computer import LiveComputer
from bank_teller.app.teller import Teller
from bank_teller.domain.account import Account, RatedAccount, rate_account
from bank_teller.domain.customer import Customer
from bank_teller.infrastructure.scripted import ScriptedCommunicate


@pytest.fixture
def customer() -> Customer:
    """Customer used across account tests"""
    return Customer("sagwa")


@pytest.fixture
def rated(customer: Customer) -> Callable[[float], RatedAccount]:
    """Build a rated account for the fixture customer at any balance"""

    def _rated(balance: float) -> RatedAccount:
        return rate_account(Account(customer=customer, balance=balance))

    return _rated


@pytest.fixture
def make_teller() -> Callable[[List[str]], Teller]:
    """Teller wired to a ScriptedCommunicate replaying the given input lines"""

    def _make_teller(lines: List[str]) -> Teller:
        return Teller(communicate=ScriptedCommunicate(lines), computer=LiveComputer())

    return _make_teller
