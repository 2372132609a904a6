"""
Mise - Recipe step unification.

Core:
- Step model: preparation and cooking steps, each independently numbered
- Unifier: two-list model <-> one ordered, editable sequence

The core is framework-free. Application glue (import parsing, sharing,
CLI) lives in mise_kitchen.
"""

__version__ = "1.0.0"
