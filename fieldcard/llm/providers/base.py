from __future__ import annotations

from abc import ABC, abstractmethod


class BackendError(RuntimeError):
    """
    The text-completion backend could not produce a completion:
    non-success HTTP status, or the request never got an answer.
    """


class BaseBackend(ABC):
    """
    Base class for text-completion backends. Subclasses implement
    complete(prompt) -> str and raise BackendError on failure.
    """

    name: str = "base"
    model: str = ""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Return the completion text only (not the prompt).
        """
        raise NotImplementedError
