"""README post-processing helpers."""

from .badges import BadgeComposer

__all__ = ["BadgeComposer"]
