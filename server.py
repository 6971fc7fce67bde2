"""
Restaurant Chatbot FastAPI application.
Serves the chat widget and the single /chat endpoint.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from agent import ChatAgent, build_llm
from config import settings
from exceptions import ChatbotError
from middleware import (
    RequestLoggingMiddleware,
    chatbot_exception_handler,
    general_exception_handler,
    validation_exception_handler,
)

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    source: str
    answer: str


@lru_cache
def get_agent() -> ChatAgent:
    """Build the model and bind the tools once per process."""
    logger.info("Initializing %s chat model", settings.llm_provider)
    return ChatAgent(build_llm(settings))


app = FastAPI(title="Restaurant Chatbot", docs_url=None, redoc_url=None)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ChatbotError, chatbot_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.post("/chat", response_model=ChatResponse)
def chat(payload: ChatRequest, agent: ChatAgent = Depends(get_agent)):
    reply = agent.reply(payload.message)
    return ChatResponse(source=reply.source, answer=reply.answer)


app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


def main():
    logger.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
