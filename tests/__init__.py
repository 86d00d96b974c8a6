"""GEODEX test suite.

Layout
- unit/        : single modules, no database or network.
- integration/ : handlers, queries and adapters against real SQLite.
- contract/    : behavior shared by every implementation of an interface
                 (id generators, repositories, the location directory).
- functional/  : the ``geodex`` CLI driven through ``CliRunner``.
- fixtures/    : pytest plugins loaded by the root ``conftest.py``.

Each test is marked with its top-level folder name, so ``pytest -m unit``
runs the fast suite.
"""
