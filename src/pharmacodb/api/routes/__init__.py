"""
API Routes for the PharmacoDB API

Modular route organization by data type.
"""

from . import cell_lines
from . import tissues
from . import drugs
from . import datasets
from . import experiments

__all__ = [
    'cell_lines',
    'tissues',
    'drugs',
    'datasets',
    'experiments',
]
