from typing import Optional


class ChatbotError(Exception):
    """Base class for errors raised by the chatbot.

    Attributes:
        message: human-readable message
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message


class MissingMessageError(ChatbotError):
    """Raised when a chat request carries no usable message text."""

    http_status = 400

    def __init__(self, message: str = "Message is required"):
        super().__init__(message)


class ToolNotFoundError(ChatbotError):
    """Raised when the model asks for a tool that is not registered."""

    def __init__(self, tool_name: str, message: Optional[str] = None):
        super().__init__(message or f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
