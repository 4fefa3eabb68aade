"""
Collaborators of the login flow.

The authentication service starts a BankID login for an identifier the
login controller has already accepted. Transport and retries are the
service's own business.
"""

from typing import Protocol


class LoginService(Protocol):
    """Starts a BankID authentication."""

    async def start_bankid(self, pnr: str) -> bool:
        """
        Start BankID authentication for a personnummer.

        Returns the success flag. Raises LoginServiceError if the
        login could not be started.
        """
        ...


class LoginDelegate(Protocol):
    """Receives the outcome of a completed login."""

    def login_finished(self, successful: bool) -> None:
        ...
