"""Reference coordinate exports."""

from .reference import ROOT_POINTER, Reference

__all__ = ["ROOT_POINTER", "Reference"]
