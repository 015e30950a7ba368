"""Dependency providers for the teller"""

from bank_teller.app.computer import Computer, LiveComputer
from bank_teller.infrastructure.communicate import Communicate, ConsoleCommunicate


def get_communicate() -> Communicate:
    """Provide the terminal-backed Communicate"""
    return ConsoleCommunicate()


def get_computer() -> Computer:
    """Provide the in-process account Computer"""
    return LiveComputer()
