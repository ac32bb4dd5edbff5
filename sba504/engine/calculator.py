"""Calculator orchestrator: composes the engine into one own-vs-rent summary.

Pure computation. No I/O. SBA504Scenario in, CalculatorSummary out.
"""

import logging

from sba504.engine.crossover import crossover_month
from sba504.engine.debt import monthly_payment
from sba504.engine.equity import break_even_month, equity_breakdown, scenario_equity
from sba504.engine.rent import rent_at_month
from sba504.engine.tax import average_monthly_tax_benefit, monthly_tax_benefit
from sba504.models.results import (
    CalculatorSummary,
    PaymentBreakdown,
    PaymentComparisonPoint,
)
from sba504.models.scenario import SBA504Scenario

logger = logging.getLogger(__name__)

MAX_PROJECTION_YEARS = 30
COMPARISON_STEP_MONTHS = 6
EQUITY_SNAPSHOT_MONTHS = 60


def payment_breakdown(scenario: SBA504Scenario) -> PaymentBreakdown:
    first = scenario.first_mortgage
    sba = scenario.sba_loan
    return PaymentBreakdown(
        first_mortgage=monthly_payment(first.principal, first.annual_rate_pct, first.term_years),
        sba_loan=monthly_payment(sba.principal, sba.annual_rate_pct, sba.term_years),
        property_tax=scenario.premises.monthly_property_tax,
        insurance=scenario.premises.monthly_insurance,
    )


def _tax_benefit(scenario: SBA504Scenario, month: int) -> float:
    return monthly_tax_benefit(
        scenario.purchase_price,
        scenario.building_value,
        scenario.first_mortgage,
        scenario.sba_loan,
        scenario.premises.property_tax_rate_pct,
        scenario.tax.income_tax_rate_pct,
        month,
    )


def payment_comparison(
    scenario: SBA504Scenario, payments: PaymentBreakdown
) -> list[PaymentComparisonPoint]:
    """Buy vs rent monthly payment every 6 months through the occupancy period.

    Month 0 carries no tax benefit yet.
    """
    years = min(scenario.occupancy_years, MAX_PROJECTION_YEARS)
    points: list[PaymentComparisonPoint] = []

    for month in range(0, years * 12 + 1, COMPARISON_STEP_MONTHS):
        tax_benefit = 0.0 if month == 0 else _tax_benefit(scenario, month)
        points.append(PaymentComparisonPoint(
            month=month,
            buy_payment=payments.total - tax_benefit,
            rent_payment=rent_at_month(
                scenario.rent.initial_monthly_rent, scenario.rent.annual_increase_pct, month
            ),
        ))

    return points


def run_calculator(scenario: SBA504Scenario) -> CalculatorSummary:
    """Run the complete own-vs-rent calculation for one scenario."""
    payments = payment_breakdown(scenario)

    avg_tax_benefit = average_monthly_tax_benefit(
        scenario.purchase_price,
        scenario.building_value,
        scenario.first_mortgage,
        scenario.sba_loan,
        scenario.premises.property_tax_rate_pct,
        scenario.tax.income_tax_rate_pct,
    )

    crossover = crossover_month(scenario)
    break_even = break_even_month(scenario)
    years = min(scenario.occupancy_years, MAX_PROJECTION_YEARS)

    logger.debug(
        "Calculated scenario: price=%.0f crossover=%d break_even=%d",
        scenario.purchase_price,
        crossover,
        break_even,
    )

    return CalculatorSummary(
        payments=payments,
        monthly_rent=scenario.rent.initial_monthly_rent,
        average_monthly_tax_benefit=avg_tax_benefit,
        crossover_month=crossover,
        equity_after_five_years=scenario_equity(scenario, EQUITY_SNAPSHOT_MONTHS),
        break_even_month=break_even,
        payment_comparison=payment_comparison(scenario, payments),
        equity_breakdown=equity_breakdown(scenario, years),
    )
