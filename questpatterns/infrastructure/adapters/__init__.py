"""Infrastructure adapters package."""

from .staff_adapter import StaffAdapter

__all__ = ["StaffAdapter"]
