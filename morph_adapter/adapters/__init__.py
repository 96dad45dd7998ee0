"""
Infrastructure adapters.

Concrete implementations of the core ports. Each morphology service gets
its own subpackage; shared HTTP behaviour lives in `base_adapter`.
"""
