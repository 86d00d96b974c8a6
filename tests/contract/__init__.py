"""Contract tests.

Each folder states the behavior of one interface once and runs it against
every implementation through parametrized fixtures.
"""
