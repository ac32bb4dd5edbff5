from dataclasses import dataclass, field


@dataclass(frozen=True)
class PaymentBreakdown:
    first_mortgage: float
    sba_loan: float
    property_tax: float
    insurance: float

    @property
    def total(self) -> float:
        return self.first_mortgage + self.sba_loan + self.property_tax + self.insurance


@dataclass(frozen=True)
class PaymentComparisonPoint:
    month: int
    buy_payment: float  # Total monthly payment net of that month's tax benefit
    rent_payment: float


@dataclass(frozen=True)
class EquityBreakdownPoint:
    year: int
    down_payment: float
    principal_paid: float  # Both loans
    appreciation: float

    @property
    def total(self) -> float:
        return self.down_payment + self.principal_paid + self.appreciation


@dataclass
class CalculatorSummary:
    payments: PaymentBreakdown
    monthly_rent: float = 0.0  # Current rent, month 0
    average_monthly_tax_benefit: float = 0.0  # Over the first year
    crossover_month: int = -1  # -1 = owning never beats renting within 30 years
    equity_after_five_years: float = 0.0
    break_even_month: int = -1  # -1 = equity never doubles the down payment
    payment_comparison: list[PaymentComparisonPoint] = field(default_factory=list)
    equity_breakdown: list[EquityBreakdownPoint] = field(default_factory=list)

    @property
    def effective_monthly_payment(self) -> float:
        return self.payments.total - self.average_monthly_tax_benefit

    @property
    def payment_difference(self) -> float:
        """Effective payment minus current rent. Negative = owning is cheaper up front."""
        return self.effective_monthly_payment - self.monthly_rent

    @property
    def tax_benefit_share(self) -> float:
        """Fraction of the effective monthly payment offset by tax benefits."""
        if self.effective_monthly_payment == 0:
            return 0.0
        return self.average_monthly_tax_benefit / self.effective_monthly_payment
