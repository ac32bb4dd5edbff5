"""Monthly tax benefit of owning: deductible interest, depreciation, property tax.

A deduction-based estimate at a flat income tax rate. No passive-loss limits
and no cap against actual tax liability.

Pure functions. No I/O.
"""

from sba504.engine.debt import interest_for_month
from sba504.models.scenario import LoanTerms

COMMERCIAL_DEPRECIATION_YEARS = 39  # Nonresidential real property, straight-line


def monthly_depreciation(building_value: float) -> float:
    """39-year straight-line depreciation, per month."""
    return building_value / COMMERCIAL_DEPRECIATION_YEARS / 12


def monthly_tax_benefit(
    purchase_price: float,
    building_value: float,
    first_mortgage: LoanTerms,
    sba_loan: LoanTerms,
    property_tax_rate_pct: float,
    income_tax_rate_pct: float,
    month: int,
) -> float:
    """Tax saved in ``month`` (1-indexed) from ownership deductions.

    Deductions = interest on both loans + depreciation + property tax,
    multiplied by the income tax rate.
    """
    first_interest = interest_for_month(
        first_mortgage.principal, first_mortgage.annual_rate_pct, month
    )
    sba_interest = interest_for_month(sba_loan.principal, sba_loan.annual_rate_pct, month)

    property_tax = purchase_price * (property_tax_rate_pct / 100) / 12

    deductions = first_interest + sba_interest + monthly_depreciation(building_value) + property_tax
    return deductions * (income_tax_rate_pct / 100)


def average_monthly_tax_benefit(
    purchase_price: float,
    building_value: float,
    first_mortgage: LoanTerms,
    sba_loan: LoanTerms,
    property_tax_rate_pct: float,
    income_tax_rate_pct: float,
    months: int = 12,
) -> float:
    """Mean monthly tax benefit over months 1..``months`` (first year by default)."""
    if months <= 0:
        return 0.0
    total = sum(
        monthly_tax_benefit(
            purchase_price,
            building_value,
            first_mortgage,
            sba_loan,
            property_tax_rate_pct,
            income_tax_rate_pct,
            month,
        )
        for month in range(1, months + 1)
    )
    return total / months
