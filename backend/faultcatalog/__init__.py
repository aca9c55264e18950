# backend/faultcatalog/__init__.py
from __future__ import annotations

"""
Marks `faultcatalog` as a Python package.

The result model lives in faultcatalog.schemas, the classifier and
dispatcher in faultcatalog.services.diagnostics, and the demonstrated
operations in faultcatalog.services.operations.
"""

__version__ = "0.1.0"
