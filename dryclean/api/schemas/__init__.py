# This file marks the schemas package for API response and record models.
# It exists so schema modules can be imported as one coherent namespace.
