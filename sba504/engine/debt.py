"""Loan math for the two SBA 504 loans: fixed payment, principal paid, interest.

Pure functions: floats in, floats out. No I/O. Rates are annual percentages
(6.0 for 6%). Degenerate inputs (zero term) are not guarded; NaN/inf propagate.
"""


def monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Calculate fixed monthly loan payment."""
    r = annual_rate_pct / 100 / 12
    n = term_years * 12

    if r == 0:
        return principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * r * factor / (factor - 1)


def principal_paid(
    principal: float,
    annual_rate_pct: float,
    term_years: int,
    months: int,
) -> float:
    """Cumulative principal repaid after ``months`` payments.

    Walks the amortization schedule month by month so the result matches the
    schedule implied by ``monthly_payment``. ``months`` past the term is
    capped at payoff.

    Args:
        principal: Original loan amount
        annual_rate_pct: Annual interest rate in percent
        term_years: Loan term in years
        months: Payments made so far (>= 0)
    """
    n = term_years * 12
    months_to_pay = min(months, n)
    r = annual_rate_pct / 100 / 12

    if r == 0:
        return (principal / n) * months_to_pay

    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    balance = principal
    total_principal = 0.0

    for _ in range(months_to_pay):
        interest = balance * r
        principal_portion = pmt - interest
        total_principal += principal_portion
        balance -= principal_portion

    return total_principal


def interest_for_month(principal: float, annual_rate_pct: float, month_number: int) -> float:
    """Approximate interest charged in a given month (1-indexed).

    Decays the original balance geometrically by the monthly rate instead of
    walking the schedule, so it drifts from ``principal_paid`` on long loans.
    Only the tax benefit estimate uses it.
    """
    r = annual_rate_pct / 100 / 12
    balance = principal * (1 - r) ** (month_number - 1)
    return balance * r
