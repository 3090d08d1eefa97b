"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Optional


class IdentityService(ABC):
    """
    Interface for resolving the caller of the current request.

    Authentication happens upstream; this only exposes its outcome.
    """

    @abstractmethod
    def get_caller_identity(self) -> Optional[str]:
        """
        Get the identity-provider subject of the caller.

        Returns:
            Identity string, or None/empty when no caller is authenticated
        """
        pass


__all__ = ["IdentityService"]
