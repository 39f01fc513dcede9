import logging
from typing import Optional

from twilio.rest import Client

from ..core.config import TwilioProperties


logger = logging.getLogger(__name__)


class SmsService:
    """Send text messages through Twilio using the configured sender number."""

    def __init__(self, properties: TwilioProperties, client: Optional[Client] = None):
        self.properties = properties
        self._client = client

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = Client(self.properties.account_sid, self.properties.auth_token)
        return self._client

    def send_sms(self, to_phone_number: str, message_content: str) -> str:
        """Send ``message_content`` to ``to_phone_number`` and return the message SID.

        Twilio errors (``TwilioRestException`` and friends) are not caught.
        """
        self.properties.validate()
        message = self._get_client().messages.create(
            to=to_phone_number,
            from_=self.properties.phone_number,
            body=message_content,
        )
        logger.info(f"SMS sent with SID: {message.sid}")
        return message.sid
