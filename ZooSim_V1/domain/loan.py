"""Daily loans repaid in fixed installments."""

from dataclasses import dataclass, field

from ZooSim_V1.core.errors import InvalidLoanTerm
from ZooSim_V1.data.zoo_params import LOAN_DAILY_RATE


@dataclass
class Loan:
    """Fixed-installment loan repaid once per day.

    The installment is computed once at creation with simple interest over the
    whole term and never recomputed:
    ``daily_repayment = (principal + principal * daily_rate * days) / days``.

    Attributes:
        principal: Borrowed amount, credited to the zoo at issuance.
        days: Term of the loan in days (strictly positive).
        daily_rate: Simple daily interest rate (0.5 % by default).
        daily_repayment: Fixed amount paid every day.
        days_left: Installments still due; the loan is retired at 0.

    Raises:
        InvalidLoanTerm: If ``days <= 0``.
    """

    principal: float
    days: int
    daily_rate: float = LOAN_DAILY_RATE
    daily_repayment: float = field(init=False)
    days_left: int = field(init=False)

    def __post_init__(self) -> None:
        if self.days <= 0:
            raise InvalidLoanTerm(f"Loan term must be positive, got {self.days} days.")
        total_interest = self.principal * self.daily_rate * self.days
        self.daily_repayment = (self.principal + total_interest) / self.days
        self.days_left = self.days

    @property
    def remaining_debt(self) -> float:
        return self.daily_repayment * self.days_left

    @property
    def paid_off(self) -> bool:
        return self.days_left <= 0

    def pay_installment(self) -> float:
        """Settle one day of the loan.

        Returns:
            The amount paid (0.0 when nothing is due anymore).
        """
        if self.days_left <= 0:
            return 0.0
        self.days_left -= 1
        return self.daily_repayment
