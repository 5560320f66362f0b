"""Call session models."""


class CallControlResponse:
    """TwiML reply for one inbound call webhook."""

    def __init__(self, twiml: str, status_code: int = 200):
        self.twiml = twiml
        self.status_code = status_code
