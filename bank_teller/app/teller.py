"""Teller - drives one customer session from sign-in to quit"""

import logging
from bank_teller.app.computer import Computer
from bank_teller.domain.account import Overdrawn, RatedAccount
from bank_teller.domain.amount import Amount
from bank_teller.domain.customer import Customer
from bank_teller.domain.exceptions import EmptyCustomerNameError, NegativeAmountError
from bank_teller.infrastructure.communicate import Communicate
from bank_teller.infrastructure.observability.metrics import (
    invalid_command_counter,
    invalid_input_counter,
    rejected_withdrawal_counter,
)

logger = logging.getLogger(__name__)

NAME_PROMPT = "Enter name: "
EMPTY_NAME_MESSAGE = "Customer name may not be empty."
AMOUNT_PROMPT = "Enter amount: "
INVALID_NUMBER_MESSAGE = "Invalid number."
NEGATIVE_NUMBER_MESSAGE = "Number cannot be negative."
BALANCE_MESSAGE = "Current balance is: {balance}"
COMMAND_PROMPT = "(d)eposit, (w)ithdraw, or (q)uit: "
OVERDRAWN_MESSAGE = "Account is already overdrawn."
INVALID_COMMAND_MESSAGE = "Invalid command."


class Teller:
    """Talks to the customer through a Communicate and lets a Computer do the arithmetic"""

    def __init__(self, communicate: Communicate, computer: Computer):
        self.communicate = communicate
        self.computer = computer

    def get_customer(self) -> Customer:
        """Ask for a name until a non-empty one is given"""
        while True:
            self.communicate.write(NAME_PROMPT)
            try:
                return Customer(self.communicate.read_line())
            except EmptyCustomerNameError:
                invalid_input_counter.labels(field="name", reason="empty").inc()
                logger.info("Rejected customer name", extra={"reason": "empty"})
                self.communicate.write_line(EMPTY_NAME_MESSAGE)

    def get_amount(self) -> Amount:
        """Ask for an amount until a non-negative number is given"""
        while True:
            self.communicate.write(AMOUNT_PROMPT)
            text = self.communicate.read_line().strip()
            try:
                return Amount(float(text))
            except NegativeAmountError:
                reason, message = "negative", NEGATIVE_NUMBER_MESSAGE
            except ValueError:
                reason, message = "not_a_number", INVALID_NUMBER_MESSAGE

            invalid_input_counter.labels(field="amount", reason=reason).inc()
            logger.info("Rejected amount", extra={"reason": reason, "input": text})
            self.communicate.write_line(message)

    def summarize_account(self, account: RatedAccount) -> None:
        self.communicate.write_line(BALANCE_MESSAGE.format(balance=account.account.balance))

    def prompt(self) -> None:
        self.communicate.write(COMMAND_PROMPT)

    def interact(self) -> RatedAccount:
        """
        Run the session loop.

        Flow:
        1. Identify the customer and open an account at 0.0
        2. Show the balance and read a command
        3. d: deposit, w: withdraw (refused while overdrawn), q: quit
        4. Repeat from 2 until quit

        Returns the account as it stands when the customer quits.
        """
        customer = self.get_customer()
        account = self.computer.get_account(customer)

        did_quit = False
        while not did_quit:
            self.summarize_account(account)
            self.prompt()

            command = self.communicate.read_char()
            if command == "q":
                did_quit = True
            elif command == "d":
                amount = self.get_amount()
                account = self.computer.deposit(amount, account)
            elif command == "w":
                if isinstance(account, Overdrawn):
                    rejected_withdrawal_counter.inc()
                    logger.warning(
                        "Withdrawal refused on overdrawn account",
                        extra={"customer": str(customer), "balance": account.account.balance},
                    )
                    self.communicate.write_line(OVERDRAWN_MESSAGE)
                else:
                    amount = self.get_amount()
                    account = self.computer.withdraw(amount, account.credit_account)
            else:
                invalid_command_counter.inc()
                self.communicate.write_line(INVALID_COMMAND_MESSAGE)

        logger.info("Session ended", extra={"customer": str(customer), "balance": account.account.balance})
        return account
