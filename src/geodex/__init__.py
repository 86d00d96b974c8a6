"""GEODEX

Record services for countries, cities and users built on a shared
command/query composition layer: validated mutations with uniqueness rules,
and lazy read queries with dynamic filtering, ordering, joins and paging.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
