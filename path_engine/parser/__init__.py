"""
Markup parsing into path_engine element trees.
"""

from .tree_builder import TreeBuilder, parse_markup

__all__ = ['TreeBuilder', 'parse_markup']
