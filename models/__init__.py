"""Record types loaded by the repositories."""

from .lego_set import LegoSet

__all__ = ['LegoSet']
