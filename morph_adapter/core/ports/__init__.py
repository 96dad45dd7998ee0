"""
Core Ports (Interfaces).

This package defines the abstract base classes that the Infrastructure
Adapters must implement. These interfaces allow the Core Domain to request
morphological analyses without knowing which remote service answers them.
"""

from .morphology_service import IMorphologyService

__all__ = [
    "IMorphologyService",
]
