"""
Headless login controller.

Tracks the identifier being typed, enables submit once it classifies as
an accepted number, and hands it to the login service on submit.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from sweid.config import current_date, settings
from sweid.exceptions import LoginServiceError
from sweid.identity import CoordinationNumber, PersonalNumber, classify, mask_identifier
from sweid.identity.classifier import ClassificationResult
from sweid.login.service import LoginDelegate, LoginService

logger = logging.getLogger(__name__)


@dataclass
class LoginState:
    """What a login screen would render."""

    identifier: str = ""
    submit_enabled: bool = False
    loading: bool = False
    last_error: Optional[LoginServiceError] = None


class LoginController:
    """
    Gate between identifier input and BankID login.

    Invalid input only disables submit; it is never reported as an error.
    """

    def __init__(
        self,
        service: LoginService,
        delegate: LoginDelegate,
        clock: Callable[[], date] = current_date,
        accept_coordination_numbers: Optional[bool] = None,
    ):
        """
        Initialize the controller.

        Args:
            service: Starts the BankID login
            delegate: Informed when a login completes
            clock: Returns today's date for classification
            accept_coordination_numbers: Also enable submit for samordningsnummer.
                Defaults to the configured policy.
        """
        self._service = service
        self._delegate = delegate
        self._clock = clock
        if accept_coordination_numbers is None:
            accept_coordination_numbers = settings.accept_coordination_numbers
        self._accept_coordination_numbers = accept_coordination_numbers
        self.state = LoginState()

    @property
    def submit_enabled(self) -> bool:
        return self.state.submit_enabled

    def is_accepted(self, result: ClassificationResult) -> bool:
        """Check whether a classification may be used to log in."""
        if isinstance(result, PersonalNumber):
            return True
        if isinstance(result, CoordinationNumber):
            return self._accept_coordination_numbers
        return False

    def identifier_changed(self, text: str) -> bool:
        """
        Update the identifier after an edit.

        Returns whether submit is enabled.
        """
        result = classify(text, self._clock())
        self.state.identifier = text
        self.state.submit_enabled = self.is_accepted(result)
        return self.state.submit_enabled

    async def login(self) -> bool:
        """
        Start BankID login for the current identifier.

        Returns True only if the service reported a successful login.
        """
        if not self.state.submit_enabled:
            logger.warning("Login attempted without an accepted identifier")
            return False

        pnr = self.state.identifier
        self.state.loading = True
        self.state.last_error = None

        try:
            successful = await self._service.start_bankid(pnr)
        except LoginServiceError as e:
            logger.error(f"BankID login failed for {mask_identifier(pnr)}: {e}")
            self.state.last_error = e
            return False
        finally:
            self.state.loading = False

        logger.info(f"BankID login finished for {mask_identifier(pnr)}: success={successful}")
        self._delegate.login_finished(successful)
        return successful
