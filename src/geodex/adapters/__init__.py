"""Adapters: concrete implementations of the GEODEX interfaces."""
