# backend/faultcatalog/services/__init__.py
from __future__ import annotations

"""
Service layer: diagnostics (classification + dispatch), the demonstrated
operations, and the sequential demonstration runner.
"""
