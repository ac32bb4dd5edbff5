from dataclasses import dataclass
from enum import Enum


class PropertyType(Enum):
    OFFICE = "office"
    RETAIL = "retail"
    INDUSTRIAL = "industrial"
    MIXED_USE = "mixed-use"


@dataclass(frozen=True)
class LoanTerms:
    """One fixed-rate amortizing loan."""
    principal: float
    annual_rate_pct: float  # e.g. 6.0 for 6%
    term_years: int


@dataclass(frozen=True)
class PropertyScenario:
    purchase_price: float
    down_payment: float
    appreciation_rate_pct: float = 2.0
    property_tax_rate_pct: float = 1.1  # Annual, % of purchase price
    insurance_rate_pct: float = 0.5  # Annual, % of purchase price
    property_type: PropertyType = PropertyType.OFFICE

    @property
    def monthly_property_tax(self) -> float:
        return self.purchase_price * (self.property_tax_rate_pct / 100) / 12

    @property
    def monthly_insurance(self) -> float:
        return self.purchase_price * (self.insurance_rate_pct / 100) / 12


@dataclass(frozen=True)
class RentScenario:
    initial_monthly_rent: float
    annual_increase_pct: float = 3.0


@dataclass(frozen=True)
class TaxProfile:
    income_tax_rate_pct: float
    building_value_fraction: float = 0.80  # Land is not depreciable


@dataclass(frozen=True)
class SBA504Scenario:
    """Everything the engine needs for one own-vs-rent comparison.

    down_payment + first_mortgage.principal + sba_loan.principal should roughly
    equal purchase_price; that is left to whoever builds the scenario.
    """
    premises: PropertyScenario
    first_mortgage: LoanTerms
    sba_loan: LoanTerms
    rent: RentScenario
    tax: TaxProfile
    occupancy_years: int = 10

    @property
    def purchase_price(self) -> float:
        return self.premises.purchase_price

    @property
    def down_payment(self) -> float:
        return self.premises.down_payment

    @property
    def building_value(self) -> float:
        return self.premises.purchase_price * self.tax.building_value_fraction
