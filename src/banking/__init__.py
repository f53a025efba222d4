"""
Bank account kata: Outside-In TDD on a hexagonal architecture.
"""

__version__ = "1.0.0"
