"""Domain models and types for ledgerview.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from ledgerview.domain.models import CategoryName, CategoryType, Money, Month

__all__ = ["Money", "Month", "CategoryName", "CategoryType"]
