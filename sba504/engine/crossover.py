"""Crossover search: first month at which owning has cost less than renting.

Pure computation. No I/O.
"""

from sba504.engine.debt import monthly_payment
from sba504.engine.equity import loans_principal_paid
from sba504.engine.rent import rent_at_month
from sba504.engine.tax import monthly_tax_benefit
from sba504.models.scenario import SBA504Scenario

CROSSOVER_HORIZON_MONTHS = 360  # 30 years
NO_CROSSOVER = -1


def crossover_month(scenario: SBA504Scenario) -> int:
    """Scan months 1..360 comparing cumulative rent against net ownership cost.

    Ownership starts at the down payment. Each month adds both loan payments,
    property tax and insurance, less that month's tax benefit, then credits
    equity built: the average principal repaid per month so far plus a flat
    monthly share of one year's appreciation.

    Returns the first month where cumulative ownership cost is below
    cumulative rent, or NO_CROSSOVER.
    """
    prop = scenario.premises
    first = scenario.first_mortgage
    sba = scenario.sba_loan

    first_payment = monthly_payment(first.principal, first.annual_rate_pct, first.term_years)
    sba_payment = monthly_payment(sba.principal, sba.annual_rate_pct, sba.term_years)
    fixed_costs = first_payment + sba_payment + prop.monthly_property_tax + prop.monthly_insurance
    monthly_appreciation = prop.purchase_price * (prop.appreciation_rate_pct / 100) / 12

    cumulative_rent = 0.0
    cumulative_ownership = prop.down_payment

    for month in range(1, CROSSOVER_HORIZON_MONTHS + 1):
        cumulative_rent += rent_at_month(
            scenario.rent.initial_monthly_rent, scenario.rent.annual_increase_pct, month
        )

        tax_benefit = monthly_tax_benefit(
            prop.purchase_price,
            scenario.building_value,
            first,
            sba,
            prop.property_tax_rate_pct,
            scenario.tax.income_tax_rate_pct,
            month,
        )
        cumulative_ownership += fixed_costs - tax_benefit

        # Running average, not this month's marginal principal
        average_principal = loans_principal_paid(first, sba, month) / month
        cumulative_ownership -= average_principal + monthly_appreciation

        if cumulative_ownership < cumulative_rent:
            return month

    return NO_CROSSOVER
