"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class CalculateRequest(BaseModel):
    """Calculator inputs. Ranges mirror what the calculator page offers."""

    # Property
    purchase_price: float = Field(1_000_000, ge=100_000, le=15_000_000)
    property_type: str = Field("office", pattern="^(office|retail|industrial|mixed-use)$")
    appreciation_rate: float = Field(2.0, ge=0, le=7, description="Annual appreciation, %")

    # Loan structure
    down_payment_pct: float = Field(10.0, ge=10, le=25)
    first_mortgage_rate: float = Field(6.0, ge=3, le=12)
    sba_rate: float = Field(5.0, ge=2, le=8)
    first_mortgage_term: int = Field(10, gt=0, description="Years: 7, 10 or 25")

    # Rent comparison
    monthly_rent: float = Field(5000, ge=1000, le=50_000)
    annual_rent_increase: float = Field(3.0, ge=0, le=10)

    # Business
    occupancy_years: int = Field(10, ge=1, le=30)
    tax_bracket: float = Field(25.0, ge=15, le=37)


# ---- Response schemas ----

class PaymentBreakdownResponse(BaseModel):
    first_mortgage: Decimal
    sba_loan: Decimal
    property_tax: Decimal
    insurance: Decimal
    total: Decimal


class PaymentComparisonResponse(BaseModel):
    month: int
    buy_payment: Decimal
    rent_payment: Decimal


class EquityBreakdownResponse(BaseModel):
    year: int
    down_payment: Decimal
    principal_paid: Decimal
    appreciation: Decimal
    total: Decimal


class CalculateResponse(BaseModel):
    property_type: str
    payments: PaymentBreakdownResponse
    monthly_rent: Decimal
    average_monthly_tax_benefit: Decimal
    effective_monthly_payment: Decimal
    payment_difference: Decimal
    tax_benefit_share: Decimal
    crossover_month: int
    equity_after_five_years: Decimal
    break_even_month: int
    payment_comparison: list[PaymentComparisonResponse] = []
    equity_breakdown: list[EquityBreakdownResponse] = []


class CrossoverResponse(BaseModel):
    crossover_month: int
    years: int | None = None
    months: int | None = None
