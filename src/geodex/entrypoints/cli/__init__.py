"""GEODEX command-line interface."""
