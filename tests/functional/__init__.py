"""Functional tests of the ``geodex`` command line, treated as a black box."""
