"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class EmptyCustomerNameError(DomainException):
    """Customer name is empty once surrounding whitespace is removed"""

    pass


class NegativeAmountError(DomainException):
    """Monetary amount is below zero"""

    pass
