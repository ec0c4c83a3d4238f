"""CLI package for Livres & Lieux"""
from .main import cli

__all__ = ['cli']
