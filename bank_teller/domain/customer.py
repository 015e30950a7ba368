"""Customer value object"""

from dataclasses import dataclass
from bank_teller.domain.exceptions import EmptyCustomerNameError


@dataclass(frozen=True)
class Customer:
    """
    Account holder identified by name.

    The name is stored trimmed; construction fails when nothing but
    whitespace was given.
    """

    name: str

    def __post_init__(self) -> None:
        name = self.name.strip()
        if not name:
            raise EmptyCustomerNameError("Customer name may not be empty")

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return self.name
