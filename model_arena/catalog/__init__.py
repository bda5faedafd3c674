"""Catalog package initialization."""
from .models import DisplayModel, STATIC_CATALOG
from .provider import ModelCatalog

__all__ = [
    'DisplayModel',
    'STATIC_CATALOG',
    'ModelCatalog'
]
