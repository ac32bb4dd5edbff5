"""Owner equity: down payment + appreciation + principal repaid on both loans.

Pure functions. No I/O.
"""

from sba504.engine.debt import principal_paid
from sba504.models.results import EquityBreakdownPoint
from sba504.models.scenario import LoanTerms, SBA504Scenario

BREAK_EVEN_HORIZON_MONTHS = 360


def appreciation_at_month(
    purchase_price: float, appreciation_rate_pct: float, months: int
) -> float:
    """Value gained over ``months``, compounding annually on a fractional-year exponent."""
    appreciated_value = purchase_price * (1 + appreciation_rate_pct / 100) ** (months / 12)
    return appreciated_value - purchase_price


def loans_principal_paid(first_mortgage: LoanTerms, sba_loan: LoanTerms, months: int) -> float:
    """Principal repaid across both loans after ``months`` payments."""
    return principal_paid(
        first_mortgage.principal,
        first_mortgage.annual_rate_pct,
        first_mortgage.term_years,
        months,
    ) + principal_paid(
        sba_loan.principal,
        sba_loan.annual_rate_pct,
        sba_loan.term_years,
        months,
    )


def equity_at_month(
    purchase_price: float,
    down_payment: float,
    first_mortgage: LoanTerms,
    sba_loan: LoanTerms,
    appreciation_rate_pct: float,
    months: int,
) -> float:
    """Total equity ``months`` after purchase."""
    equity = down_payment
    equity += appreciation_at_month(purchase_price, appreciation_rate_pct, months)
    equity += loans_principal_paid(first_mortgage, sba_loan, months)
    return equity


def scenario_equity(scenario: SBA504Scenario, months: int) -> float:
    return equity_at_month(
        scenario.purchase_price,
        scenario.down_payment,
        scenario.first_mortgage,
        scenario.sba_loan,
        scenario.premises.appreciation_rate_pct,
        months,
    )


def equity_breakdown(scenario: SBA504Scenario, years: int) -> list[EquityBreakdownPoint]:
    """Year-end equity split into its three sources, years 0..``years``.

    Year 0 is the down payment alone.
    """
    points: list[EquityBreakdownPoint] = []

    for year in range(0, years + 1):
        months = year * 12
        if year == 0:
            points.append(EquityBreakdownPoint(
                year=0,
                down_payment=scenario.down_payment,
                principal_paid=0.0,
                appreciation=0.0,
            ))
            continue

        equity = scenario_equity(scenario, months)
        paid = loans_principal_paid(scenario.first_mortgage, scenario.sba_loan, months)

        points.append(EquityBreakdownPoint(
            year=year,
            down_payment=scenario.down_payment,
            principal_paid=paid,
            appreciation=equity - scenario.down_payment - paid,
        ))

    return points


def break_even_month(scenario: SBA504Scenario) -> int:
    """First month at which equity has doubled the down payment.

    Returns -1 if that never happens within 30 years, the same "not reached"
    value crossover_month uses. 0 is never returned, so callers must not read
    0 as "not reached".
    """
    target = scenario.down_payment * 2
    for month in range(1, BREAK_EVEN_HORIZON_MONTHS + 1):
        if scenario_equity(scenario, month) >= target:
            return month
    return -1
