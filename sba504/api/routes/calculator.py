"""Calculator routes — own vs rent under an SBA 504 structure."""

import logging
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, HTTPException

from sba504.api.schemas import (
    CalculateRequest,
    CalculateResponse,
    CrossoverResponse,
    EquityBreakdownResponse,
    PaymentBreakdownResponse,
    PaymentComparisonResponse,
)
from sba504.engine.calculator import run_calculator
from sba504.engine.crossover import NO_CROSSOVER, crossover_month
from sba504.engine.scenario_builder import build_scenario
from sba504.models.results import CalculatorSummary
from sba504.models.scenario import SBA504Scenario

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["calculator"])

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def _money(value: float) -> Decimal:
    return Decimal(str(value)).quantize(TWO_PLACES, ROUND_HALF_UP)


def _build(req: CalculateRequest) -> SBA504Scenario:
    """Build a scenario from request data; bad combinations become a 400."""
    try:
        return build_scenario(
            purchase_price=req.purchase_price,
            down_payment_pct=req.down_payment_pct,
            first_mortgage_rate=req.first_mortgage_rate,
            sba_rate=req.sba_rate,
            first_mortgage_term=req.first_mortgage_term,
            monthly_rent=req.monthly_rent,
            annual_rent_increase=req.annual_rent_increase,
            tax_bracket=req.tax_bracket,
            appreciation_rate=req.appreciation_rate,
            occupancy_years=req.occupancy_years,
            property_type=req.property_type,
        )
    except ValueError as e:
        logger.info("Rejected calculator input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def _summary_to_response(summary: CalculatorSummary, scenario: SBA504Scenario) -> CalculateResponse:
    """Convert engine CalculatorSummary to API response."""
    p = summary.payments
    payments = PaymentBreakdownResponse(
        first_mortgage=_money(p.first_mortgage),
        sba_loan=_money(p.sba_loan),
        property_tax=_money(p.property_tax),
        insurance=_money(p.insurance),
        total=_money(p.total),
    )

    comparison = [
        PaymentComparisonResponse(
            month=pt.month,
            buy_payment=_money(pt.buy_payment),
            rent_payment=_money(pt.rent_payment),
        )
        for pt in summary.payment_comparison
    ]

    equity = [
        EquityBreakdownResponse(
            year=pt.year,
            down_payment=_money(pt.down_payment),
            principal_paid=_money(pt.principal_paid),
            appreciation=_money(pt.appreciation),
            total=_money(pt.total),
        )
        for pt in summary.equity_breakdown
    ]

    return CalculateResponse(
        property_type=scenario.premises.property_type.value,
        payments=payments,
        monthly_rent=_money(summary.monthly_rent),
        average_monthly_tax_benefit=_money(summary.average_monthly_tax_benefit),
        effective_monthly_payment=_money(summary.effective_monthly_payment),
        payment_difference=_money(summary.payment_difference),
        tax_benefit_share=Decimal(str(summary.tax_benefit_share)).quantize(
            FOUR_PLACES, ROUND_HALF_UP
        ),
        crossover_month=summary.crossover_month,
        equity_after_five_years=_money(summary.equity_after_five_years),
        break_even_month=summary.break_even_month,
        payment_comparison=comparison,
        equity_breakdown=equity,
    )


@router.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    """Primary endpoint: calculator inputs → full own-vs-rent summary."""
    scenario = _build(req)
    summary = run_calculator(scenario)
    return _summary_to_response(summary, scenario)


@router.post("/crossover", response_model=CrossoverResponse)
def crossover(req: CalculateRequest):
    """Crossover month only, split into whole years and remaining months."""
    scenario = _build(req)
    month = crossover_month(scenario)
    if month == NO_CROSSOVER:
        return CrossoverResponse(crossover_month=month)
    return CrossoverResponse(crossover_month=month, years=month // 12, months=month % 12)
