"""Login gate: enables BankID login once a valid personnummer is entered."""

from sweid.login.controller import LoginController, LoginState
from sweid.login.service import LoginDelegate, LoginService

__all__ = [
    "LoginController",
    "LoginState",
    "LoginDelegate",
    "LoginService",
]
