# morph_adapter\core\__init__.py
"""
Core Domain Layer.

This package contains the linguistic data model and the lookup logic.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on infrastructure (HTTP clients, configuration files).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
