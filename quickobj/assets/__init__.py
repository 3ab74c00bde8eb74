# quickobj/assets/__init__.py
"""Пакет с материалами."""
from quickobj.assets.material import Material

__all__ = ["Material"]
