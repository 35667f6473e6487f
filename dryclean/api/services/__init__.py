# This file marks the services package for the in-memory stores behind the API.
# It exists so routers depend on cohesive store classes instead of shared module state.
