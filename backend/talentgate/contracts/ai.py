"""AI assistant contracts — chatbot message send."""

from talentgate.validators import IsString, IsUUID, Length, ShapeDefinition, field, optional

MAX_MESSAGE_LENGTH = 5000

SEND_MESSAGE = ShapeDefinition(
    "send_message",
    field("message", IsString(), Length(1, MAX_MESSAGE_LENGTH)),
    optional("conversationId", IsUUID()),
    description="Send a message to the recruiting assistant, optionally continuing a conversation",
)

SHAPES = [SEND_MESSAGE]
