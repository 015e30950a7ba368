"""Amount value object - a non-negative monetary magnitude"""

from dataclasses import dataclass
from bank_teller.domain.exceptions import NegativeAmountError


@dataclass(frozen=True)
class Amount:
    """Validated amount used by deposits and withdrawals"""

    value: float

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeAmountError(f"Amount cannot be negative: {self.value}")

    def __float__(self) -> float:
        return self.value
