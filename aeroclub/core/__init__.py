# aeroclub - Core value types, errors and ports
