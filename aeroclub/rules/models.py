from pydantic import BaseModel, ConfigDict, Field

from aeroclub.components.billing_cycle import DEFAULT_CYCLE_CONFIG, CycleConfig
from aeroclub.components.business_hours import BusinessHours

DEFAULT_TIME_ZONE = "Pacific/Auckland"


class TenantRules(BaseModel):
    name: str = "Aero Club"
    timezone: str = DEFAULT_TIME_ZONE


class MembershipRules(BaseModel):
    grace_period_days: int = Field(default=30, ge=0)
    expiry_warning_days: int = Field(default=30, ge=0)


class CalendarRules(BaseModel):
    """Tenant calendar configuration (rules.yaml)."""

    model_config = ConfigDict(extra="forbid")

    tenant: TenantRules = Field(default_factory=TenantRules)
    membership_year: CycleConfig = DEFAULT_CYCLE_CONFIG
    membership: MembershipRules = Field(default_factory=MembershipRules)
    business_hours: BusinessHours = Field(default_factory=BusinessHours)
