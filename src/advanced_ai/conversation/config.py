"""Conversation constants.

Centralizes the fixed texts and labels the state machine and the UI share.
"""

from ..relay.models import ModelName

APP_TITLE = "Advanced AI"
APP_SUBTITLE = "Created By Varun Ajmera"

WELCOME_TEXT = "👋 Welcome to Advanced AI! I'm your intelligent assistant."
PLACEHOLDER_TEXT = "Generating....."
FAILURE_TEXT = "Sorry, something went wrong. Please try again."

# Id of the welcome message; submitted messages count up from here
WELCOME_MESSAGE_ID = 0

MODEL_LABELS = {
    ModelName.GPT_4O_MINI: "GPT-4o Mini",
    ModelName.GPT_35_TURBO: "GPT-3.5 Turbo",
}
