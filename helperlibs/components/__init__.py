"""
Atomic components.

Each component exposes its public surface from its package __init__:
- component.py - Functional core (pure functions, entry points)
- models.py    - Config, input/output models and error types
- ports.py     - Protocol interfaces for swappable dependencies
- tests/       - Unit tests for the component
"""
