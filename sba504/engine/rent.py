"""Rent projection with annual lease escalation."""


def rent_at_month(initial_rent: float, annual_increase_pct: float, months_passed: int) -> float:
    """Monthly rent after ``months_passed`` months.

    Rent steps up once per full lease year and is flat within a year.
    """
    years_passed = months_passed // 12
    return initial_rent * (1 + annual_increase_pct / 100) ** years_passed
