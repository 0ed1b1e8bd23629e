"""Authentication providers for the HTTP transport."""

from abc import ABC, abstractmethod
from typing import Optional


class AuthenticationProvider(ABC):
    @abstractmethod
    def is_authenticated(self) -> bool:
        pass

    @abstractmethod
    def get_id_token(self) -> Optional[str]:
        pass


class TokenAuthProvider(AuthenticationProvider):
    """Static bearer token, e.g. a service API token."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def set_token(self, token: Optional[str]):
        self._token = token

    def is_authenticated(self) -> bool:
        return bool(self._token)

    def get_id_token(self) -> Optional[str]:
        return self._token
