"""Scenario builder: expands calculator inputs into a full SBA 504 scenario.

    purchase price + down payment % + rates + terms + rent + tax bracket
    → SBA504Scenario

Loan sizing follows the fixed SBA 504 structure from settings: first mortgage
at 50% of price, SBA/CDC loan at 40% with a 25-year term.
"""

from sba504.config import settings
from sba504.models.scenario import (
    LoanTerms,
    PropertyScenario,
    PropertyType,
    RentScenario,
    SBA504Scenario,
    TaxProfile,
)


def build_scenario(
    purchase_price: float = 1_000_000,
    down_payment_pct: float = 10.0,
    first_mortgage_rate: float = 6.0,
    sba_rate: float = 5.0,
    first_mortgage_term: int = 10,
    monthly_rent: float = 5000,
    annual_rent_increase: float = 3.0,
    tax_bracket: float = 25.0,
    appreciation_rate: float = 2.0,
    occupancy_years: int = 10,
    property_type: PropertyType | str = PropertyType.OFFICE,
) -> SBA504Scenario:
    """Build a scenario from calculator inputs.

    All rates are percentages. Raises ValueError for a first mortgage term
    that is not one of the offered terms.
    """
    if first_mortgage_term not in settings.first_mortgage_terms:
        offered = ", ".join(str(t) for t in settings.first_mortgage_terms)
        raise ValueError(
            f"First mortgage term must be one of {offered} years, got {first_mortgage_term}"
        )

    down_payment = purchase_price * (down_payment_pct / 100)

    return SBA504Scenario(
        premises=PropertyScenario(
            purchase_price=purchase_price,
            down_payment=down_payment,
            appreciation_rate_pct=appreciation_rate,
            property_tax_rate_pct=settings.property_tax_rate_pct,
            insurance_rate_pct=settings.insurance_rate_pct,
            property_type=PropertyType(property_type),
        ),
        first_mortgage=LoanTerms(
            principal=purchase_price * settings.first_mortgage_share,
            annual_rate_pct=first_mortgage_rate,
            term_years=first_mortgage_term,
        ),
        sba_loan=LoanTerms(
            principal=purchase_price * settings.sba_share,
            annual_rate_pct=sba_rate,
            term_years=settings.sba_term_years,
        ),
        rent=RentScenario(
            initial_monthly_rent=monthly_rent,
            annual_increase_pct=annual_rent_increase,
        ),
        tax=TaxProfile(
            income_tax_rate_pct=tax_bracket,
            building_value_fraction=settings.building_value_fraction,
        ),
        occupancy_years=occupancy_years,
    )
