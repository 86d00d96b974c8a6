"""Entry points: transport-facing dispatch and the command-line interface."""
