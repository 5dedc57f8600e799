"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rate APIs)
"""

__all__ = []
