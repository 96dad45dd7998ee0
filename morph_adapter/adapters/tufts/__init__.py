"""
Adapter for the Tufts morphology service.

Exposes the TuftsAdapter client together with its configuration loader.
"""

from morph_adapter.adapters.tufts.adapter import TuftsAdapter
from morph_adapter.adapters.tufts.config import AdapterConfig, load_adapter_config

__all__ = ["TuftsAdapter", "AdapterConfig", "load_adapter_config"]
