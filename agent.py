import logging
from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_groq import ChatGroq

from config import SYSTEM_PROMPT, Settings
from exceptions import MissingMessageError
from tools import TOOLS, find_tool

logger = logging.getLogger(__name__)

SOURCE_TOOL = "tool"
SOURCE_MODEL = "gemini"


@dataclass(frozen=True)
class ChatReply:
    source: str
    answer: str


def build_llm(settings: Settings) -> BaseChatModel:
    """Initialize the chat model for the configured provider."""
    provider = settings.llm_provider.lower()
    if provider == "gemini":
        return ChatGoogleGenerativeAI(
            model=settings.gemini_model_name,
            google_api_key=settings.google_api_key or None,
            temperature=settings.temperature,
        )
    elif provider == "groq":
        return ChatGroq(
            model=settings.groq_model_name,
            api_key=settings.groq_api_key or None,
            temperature=settings.temperature,
        )
    raise ValueError(f"Unknown LLM_PROVIDER: {settings.llm_provider}")


def message_text(message) -> str:
    """Text of a model reply; list content is reduced to its text parts."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class ChatAgent:
    """
    Single-turn restaurant assistant.

    Each reply sends the system prompt and the user's message to the model.
    When the model asks for a tool, the first requested tool is run and its
    output is the answer; otherwise the model's own text is returned.
    Nothing is kept between calls.
    """

    def __init__(self, llm, tools=None, system_prompt: str = SYSTEM_PROMPT):
        self.tools = list(tools) if tools is not None else TOOLS
        self.system_prompt = system_prompt
        self.llm_with_tools = llm.bind_tools(self.tools)

    def reply(self, message) -> ChatReply:
        if not isinstance(message, str) or not message.strip():
            raise MissingMessageError()

        response = self.llm_with_tools.invoke(
            [SystemMessage(content=self.system_prompt), HumanMessage(content=message)]
        )

        if response.tool_calls:
            call = response.tool_calls[0]
            if len(response.tool_calls) > 1:
                ignored = [c["name"] for c in response.tool_calls[1:]]
                logger.warning("Model requested %d tool calls, ignoring %s", len(response.tool_calls), ignored)
            selected = find_tool(call["name"], self.tools)
            result = selected.invoke(call.get("args") or {})
            return ChatReply(source=SOURCE_TOOL, answer=str(result))

        return ChatReply(source=SOURCE_MODEL, answer=message_text(response))
