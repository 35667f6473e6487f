"""
Package marker for the Touch of Elegance site backend.
It groups the HTTP layer under `dryclean.api` and cross-cutting helpers under `dryclean.common`.
Most functionality lives in the subpackages; this file intentionally stays lightweight.
"""

__version__ = "1.0.0"
