"""Provider interface for the alternate (remote) analyzer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CompletionRequest:
    """One prompt round-trip.

    json_mode asks the backend to constrain output to a JSON document when it
    supports that. Replies are still untrusted and must be parsed and validated.
    """

    system_prompt: str
    user_prompt: str
    max_tokens: int = 1500
    json_mode: bool = True


class AIProvider(ABC):
    """Backend that turns a CompletionRequest into raw text."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name, reported as the analysis source."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """True when the provider is configured and can be called."""
        ...

    @abstractmethod
    def complete(self, request: CompletionRequest) -> str:
        """Send the request and return the raw reply text.

        Raises:
            RuntimeError: If the backend call fails.
        """
        ...
