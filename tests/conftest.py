"""Canonical test fixtures used across all engine tests.

Fixture: $1M office building, 10% down, 50% first mortgage at 6% over 10yr,
40% SBA/CDC at 5% over 25yr. Rent $5,000/mo rising 3%/yr. 25% tax bracket.
"""

import pytest

from sba504.models.scenario import (
    LoanTerms,
    PropertyScenario,
    RentScenario,
    SBA504Scenario,
    TaxProfile,
)


@pytest.fixture
def first_mortgage() -> LoanTerms:
    return LoanTerms(principal=500000.0, annual_rate_pct=6.0, term_years=10)


@pytest.fixture
def sba_loan() -> LoanTerms:
    return LoanTerms(principal=400000.0, annual_rate_pct=5.0, term_years=25)


@pytest.fixture
def canonical_scenario(first_mortgage, sba_loan) -> SBA504Scenario:
    """Calculator defaults."""
    return SBA504Scenario(
        premises=PropertyScenario(
            purchase_price=1000000.0,
            down_payment=100000.0,
            appreciation_rate_pct=2.0,
            property_tax_rate_pct=1.1,
            insurance_rate_pct=0.5,
        ),
        first_mortgage=first_mortgage,
        sba_loan=sba_loan,
        rent=RentScenario(initial_monthly_rent=5000.0, annual_increase_pct=3.0),
        tax=TaxProfile(income_tax_rate_pct=25.0, building_value_fraction=0.8),
        occupancy_years=10,
    )


@pytest.fixture
def cheap_rent_scenario(canonical_scenario) -> SBA504Scenario:
    """Rent so low, with no appreciation or tax benefit, that owning never catches up."""
    return SBA504Scenario(
        premises=PropertyScenario(
            purchase_price=1000000.0,
            down_payment=100000.0,
            appreciation_rate_pct=0.0,
            property_tax_rate_pct=1.1,
            insurance_rate_pct=0.5,
        ),
        first_mortgage=canonical_scenario.first_mortgage,
        sba_loan=canonical_scenario.sba_loan,
        rent=RentScenario(initial_monthly_rent=100.0, annual_increase_pct=0.0),
        tax=TaxProfile(income_tax_rate_pct=0.0),
        occupancy_years=10,
    )
