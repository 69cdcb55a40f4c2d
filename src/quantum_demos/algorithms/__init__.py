"""
Search algorithm demos.

- Grover: classical linear scan vs the ⌈√N⌉ Grover iteration bound
"""
from .grover import GroverSearch, SearchComparison, grover_iterations, DEFAULT_SEARCH_SIZE

__all__ = [
    'GroverSearch', 'SearchComparison', 'grover_iterations', 'DEFAULT_SEARCH_SIZE',
]
