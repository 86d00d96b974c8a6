"""Interface for record Guid generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a generator of unique, stable record identifiers."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
