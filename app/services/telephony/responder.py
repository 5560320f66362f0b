"""TwiML call-control responses."""
from typing import Optional

from twilio.twiml.voice_response import VoiceResponse

NUMBER_NOT_IDENTIFIED_MESSAGE = "Sorry, we could not identify your number. Please try again."
CONNECTION_ERROR_MESSAGE = (
    "Sorry, there was an error connecting your call. Please try again later."
)


class CallControlResponder:
    """Generates TwiML telling Twilio what to do with a live call."""

    def __init__(self, stream_name: str = "Ultravox Stream", say_voice: Optional[str] = None):
        self.stream_name = stream_name
        self.say_voice = say_voice

    def generate_stream_twiml(self, join_url: str) -> str:
        """
        Generate TwiML that connects the call's media to a websocket stream.

        Args:
            join_url: Stream address returned by Ultravox (wss://)

        Returns:
            TwiML XML string
        """
        response = VoiceResponse()
        connect = response.connect()
        connect.stream(url=join_url, name=self.stream_name)
        return str(response)

    def generate_say_twiml(self, message: str) -> str:
        """
        Generate TwiML that speaks a message and hangs up.

        Args:
            message: Text to speak

        Returns:
            TwiML XML string
        """
        response = VoiceResponse()
        response.say(message, voice=self.say_voice)
        response.hangup()
        return str(response)
