"""
HTTP layer for the PharmacoDB API.
"""
from .app import create_app

__all__ = ['create_app']
