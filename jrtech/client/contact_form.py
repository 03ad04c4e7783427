"""
Python counterpart of the landing page contact form.

ContactFormController holds the same UI state the browser form does (input
values, loading flag, success flag, feedback text) and performs the same
round trip against POST /contact using httpx. It is handy for scripting
submissions and is what the test-suite drives instead of a browser.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
import logging

import httpx

from jrtech.core.config import get_settings

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."
NETWORK_FAILURE_MESSAGE = "Network error. Please ensure the backend server is running."


@dataclass
class ContactFormState:
    email: str = ""
    message: str = ""
    loading: bool = False
    success: Optional[bool] = None  # None until a submission has completed
    feedback: str = ""


class ContactFormController:
    """Drives one contact form through idle -> loading -> success/error"""

    def __init__(self, api_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.api_url = api_url or get_settings().contact_api_url
        self.state = ContactFormState()
        self._client = client

    def set_email(self, value: str):
        self.state.email = value

    def set_message(self, value: str):
        self.state.message = value

    def payload(self) -> Dict[str, Any]:
        return {"email": self.state.email, "message": self.state.message}

    async def submit(self) -> ContactFormState:
        """
        Send the current email and message to the backend.

        The form is cleared only on a 2xx reply. Transport failures and non-JSON
        replies are caught and turned into the network feedback message; loading
        always ends.

        Returns:
            ContactFormState: the state after the round trip
        """
        self.state.loading = True
        self.state.success = None
        self.state.feedback = ""

        try:
            response = await self._post(self.payload())
            result = self._parse_body(response)

            if response.is_success:
                self.state.success = True
                self.state.feedback = result.get("message") or ""
                self.state.email = ""
                self.state.message = ""
            else:
                self.state.success = False
                self.state.feedback = result.get("message") or GENERIC_FAILURE_MESSAGE
                logger.warning(f"Contact submission rejected with status {response.status_code}")
        except (httpx.TransportError, ValueError) as e:
            # Unreachable server, or a reply that is not JSON
            logger.error(f"Error submitting contact form: {e!r}")
            self.state.success = False
            self.state.feedback = NETWORK_FAILURE_MESSAGE
        finally:
            self.state.loading = False

        return self.state

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.api_url, json=payload)

        # No timeout, same as the browser's fetch
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.post(self.api_url, json=payload)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Dict[str, Any]:
        """Decode the JSON reply; raises ValueError when the body is not JSON"""
        body = response.json()
        return body if isinstance(body, dict) else {}
