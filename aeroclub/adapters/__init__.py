# aeroclub - Adapters (port implementations)
