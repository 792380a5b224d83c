# aeroclub - Atomic components
# Each component: models.py (DTOs), component.py (pure functions + run),
# ports.py when it takes injected capabilities
