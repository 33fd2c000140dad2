"""PDF specimen sheets for typographic scales."""

from .generator import generate_specimen, main

__all__ = ['generate_specimen', 'main']
