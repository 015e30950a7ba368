"""Unit tests for account rating and balance transitions"""

import pytest
from bank_teller.domain.account import (
    Account,
    CreditAccount,
    InCredit,
    Overdrawn,
    open_account,
    rate_account,
)
from bank_teller.domain.amount import Amount


def test_account_opens_with_balance_of_zero_and_in_credit(customer):
    """Fresh account starts at 0.0, and zero counts as in credit"""
    account = open_account(customer)

    assert account == InCredit(CreditAccount(Account(customer=customer, balance=0.0)))
    assert account.account.balance == 0.0
    assert account.rating == "in_credit"


def test_rate_account_classifies_by_sign(customer):
    """Negative balances are overdrawn, zero and above are in credit"""
    assert isinstance(rate_account(Account(customer, -0.01)), Overdrawn)
    assert isinstance(rate_account(Account(customer, 0.0)), InCredit)
    assert isinstance(rate_account(Account(customer, 0.01)), InCredit)


def test_variants_reject_inconsistent_balance(customer):
    """A variant can never disagree with the sign of its balance"""
    with pytest.raises(ValueError):
        Overdrawn(Account(customer, 10.0))
    with pytest.raises(ValueError):
        Overdrawn(Account(customer, 0.0))
    with pytest.raises(ValueError):
        CreditAccount(Account(customer, -10.0))


def test_account_view_is_the_same_for_both_variants(customer):
    """Both variants unwrap to the plain Account"""
    overdrawn = rate_account(Account(customer, -5.0))
    in_credit = rate_account(Account(customer, 5.0))

    assert overdrawn.account == Account(customer, -5.0)
    assert in_credit.account == Account(customer, 5.0)


def test_going_negative_causes_account_to_be_overdrawn(customer):
    """Withdrawing from an empty account overdraws it"""
    account = open_account(customer)
    assert isinstance(account, InCredit)

    new_account = account.credit_account.withdraw(Amount(100.0))

    assert isinstance(new_account, Overdrawn)
    assert new_account.account.balance == -100.0


@pytest.mark.parametrize(
    "deposit, expected_type, expected_balance",
    [
        (100.00, InCredit, 0.0),  # back to exactly zero
        (200.00, InCredit, 100.0),
        (25.50, Overdrawn, -74.5),  # still below zero
    ],
)
def test_deposit_into_overdrawn_account(rated, deposit, expected_type, expected_balance):
    """Deposits re-rate the account by the sign of the new balance"""
    account = rated(-100.00)
    assert isinstance(account, Overdrawn)

    new_account = account.deposit(Amount(deposit))

    assert isinstance(new_account, expected_type)
    assert new_account.account.balance == expected_balance


@pytest.mark.parametrize(
    "withdrawal, expected_type, expected_balance",
    [
        (25.0, InCredit, 75.0),
        (100.0, InCredit, 0.0),  # same as balance
        (110.0, Overdrawn, -10.0),  # more than balance is allowed
    ],
)
def test_withdraw_from_in_credit_account(rated, withdrawal, expected_type, expected_balance):
    """Withdrawals are never refused for insufficient funds"""
    account = rated(100.00)
    assert isinstance(account, InCredit)

    new_account = account.credit_account.withdraw(Amount(withdrawal))

    assert isinstance(new_account, expected_type)
    assert new_account.account.balance == expected_balance


def test_deposit_into_in_credit_account_adds_amount(rated):
    """Deposits on an in-credit account keep it in credit"""
    new_account = rated(10.0).deposit(Amount(2.5))

    assert isinstance(new_account, InCredit)
    assert new_account.account.balance == 12.5


def test_operations_do_not_mutate_the_original(rated, customer):
    """Every transition returns a new account value"""
    account = rated(50.0)
    account.deposit(Amount(25.0))
    account.credit_account.withdraw(Amount(75.0))

    assert account.account == Account(customer, 50.0)


def test_overdrawn_account_does_not_expose_withdraw(rated):
    """Withdrawal is only reachable through the in-credit marker"""
    account = rated(-1.0)
    assert not hasattr(account, "withdraw")
    assert not hasattr(account, "credit_account")
