"""Unit of Work Interface

Transaction boundary for use cases.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Abstract unit of work

    Use cases call commit() once their writes are complete and rollback()
    on any failure, including integrity errors they intend to recover from.
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
