"""Contracts between the service layer and its collaborators."""
