from abc import ABC, abstractmethod


class IdentityPort(ABC):
    """Authentication provider. The core only asks whether someone is signed in."""

    @abstractmethod
    def is_authenticated(self) -> bool: ...

    @abstractmethod
    def sign_in(self, credential: str) -> None: ...

    @abstractmethod
    def sign_out(self) -> None: ...
