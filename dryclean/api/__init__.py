# This file marks the HTTP layer package for the site backend.
# It exists so the app factory, routers, and pipeline stages share one import root.
