"""Life-context derivations shared by every scoring stage."""

from discovery_mcp.models import BasicContext, MaritalStatus

DEFAULT_TARGET_RETIREMENT_AGE = 65
NEAR_RETIREMENT_YEARS = 10
IMMINENT_RETIREMENT_YEARS = 5
LONG_HORIZON_YEARS = 20


def years_to_retirement(context: BasicContext) -> int | None:
    """Years until the target retirement age, floored at zero. None without an age."""
    if context.age is None:
        return None
    target = context.target_retirement_age or DEFAULT_TARGET_RETIREMENT_AGE
    return max(0, target - context.age)


def is_near_retirement(context: BasicContext) -> bool:
    years = years_to_retirement(context)
    return years is not None and years <= NEAR_RETIREMENT_YEARS


def is_federal_employee(context: BasicContext) -> bool:
    employment = context.federal_employment
    return employment is not None and bool(employment.retirement_system)


def has_spouse(context: BasicContext) -> bool:
    return context.marital_status in (MaritalStatus.MARRIED, MaritalStatus.DOMESTIC_PARTNERSHIP)


def has_dependents(context: BasicContext) -> bool:
    return len(context.dependents) > 0
