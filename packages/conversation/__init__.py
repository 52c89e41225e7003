# Conversation package - two-way conversation timeline
"""
Log and drive a conversation between a hearing and a signing participant.

Example usage:
    from packages.conversation import ConversationController

    controller = ConversationController()
    entry = controller.submit_text("What is your name?")
    print(entry.gloss)  # ("WHAT", "YOUR", "NAME")
"""

from .controller import ConversationController
from .log import ConversationEntry, ConversationLog
from .outputs import ConsoleSpeechOutput, NullFeedback, NullSpeechOutput

__all__ = [
    "ConversationController",
    "ConversationLog",
    "ConversationEntry",
    "NullSpeechOutput",
    "ConsoleSpeechOutput",
    "NullFeedback",
]
