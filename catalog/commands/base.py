"""
Base command for encapsulating business operations.

The Command pattern keeps the author page logic out of the HTTP
handlers: a handler parses the request, runs a command, and renders or
redirects based on the result. Commands depend only on repositories, so
they are tested with mocked repositories.

Example:
    ```python
    class ListAuthorsCommand(BaseCommand[None, list[Author]]):
        def __init__(self, repository: AuthorRepository):
            self.repository = repository

        async def execute(self, input_data: None = None) -> list[Author]:
            return await self.repository.list_by_family_name()
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Type Parameters:
        TInput: Input data type (identifier or validated form).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            NotFoundError: When the addressed author does not exist.
            SQLAlchemyError: When the database call fails.
        """
        pass
