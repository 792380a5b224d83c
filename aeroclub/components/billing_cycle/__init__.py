"""
Billing cycle component - recurring membership/billing year arithmetic
(BillingCycleCalculator).
"""

from .component import (
    compute_cycle_containing,
    compute_default_expiry,
    compute_renewal_expiry,
    cycle_label,
    describe_config,
    is_within_cycle,
    load_config_from_rules,
    next_cycle_start,
    require_valid_config,
    run,
    validate_config,
)
from .models import (
    DEFAULT_CYCLE_CONFIG,
    MONTH_NAMES,
    CycleConfig,
    CycleContainingInput,
    CycleWindow,
    DefaultExpiryInput,
    ExpiryOutput,
    RenewalExpiryInput,
    ValidateConfigInput,
    ValidateConfigOutput,
)

__all__ = [
    # Functions
    "compute_cycle_containing",
    "compute_default_expiry",
    "compute_renewal_expiry",
    "cycle_label",
    "describe_config",
    "is_within_cycle",
    "load_config_from_rules",
    "next_cycle_start",
    "require_valid_config",
    "run",
    "validate_config",
    # Models
    "CycleConfig",
    "CycleContainingInput",
    "CycleWindow",
    "DefaultExpiryInput",
    "ExpiryOutput",
    "RenewalExpiryInput",
    "ValidateConfigInput",
    "ValidateConfigOutput",
    # Constants
    "DEFAULT_CYCLE_CONFIG",
    "MONTH_NAMES",
]
