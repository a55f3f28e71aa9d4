"""Chat-completion clients for the hosted LLM, behind a narrow ``send`` interface."""

import logging
from abc import ABC, abstractmethod

from google import genai
from google.genai import types
from openai import AsyncAzureOpenAI

from config import Settings, settings
from models.requests import ChatMessage
from models.results import ErrorKind, Failure
from services.prompt_builder import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ChatModel(ABC):
    """Base class for chat-completion providers.

    Subclasses implement ``_request`` and let exceptions propagate;
    ``send`` turns errors and empty completions into ``Failure`` values.
    """

    name: str = ""

    @abstractmethod
    async def _request(self, messages: list[ChatMessage]) -> str | None:
        """Perform one round trip and return the first completion's text."""

    async def send(self, messages: list[ChatMessage]) -> str | Failure:
        try:
            text = await self._request(messages)
        except Exception as e:
            logger.error("%s API error: %s", self.name, e)
            return Failure(ErrorKind.SERVICE_ERROR, "AI service request failed", detail=str(e))

        if not text:
            logger.error("No response received from %s", self.name)
            return Failure(ErrorKind.NO_RESPONSE, "No response from AI service")
        return text


class AzureOpenAIChatModel(ChatModel):
    name = "Azure OpenAI"

    def __init__(self, endpoint: str, api_key: str, api_version: str, deployment: str) -> None:
        self.deployment = deployment
        self._client = AsyncAzureOpenAI(
            azure_endpoint=endpoint,
            api_key=api_key,
            api_version=api_version,
        )

    async def _request(self, messages: list[ChatMessage]) -> str | None:
        completion = await self._client.chat.completions.create(
            model=self.deployment,
            messages=[m.model_dump() for m in messages],
        )
        if not completion.choices:
            return None
        return completion.choices[0].message.content


class GeminiChatModel(ChatModel):
    """Gemini takes the system message as ``system_instruction``, not as content."""

    name = "Gemini"

    def __init__(self, api_key: str, model: str) -> None:
        self.model = model
        self._client = genai.Client(api_key=api_key)

    async def _request(self, messages: list[ChatMessage]) -> str | None:
        system = "\n".join(m.content for m in messages if m.role == "system")
        contents = "\n".join(m.content for m in messages if m.role == "user")
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(system_instruction=system or None),
        )
        if not response.candidates:
            return None
        return response.text


def build_messages(prompt: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=prompt),
    ]


async def complete(model: ChatModel, prompt: str) -> str | Failure:
    """Send the system instruction plus ``prompt`` and return the raw reply."""
    logger.info("Sending request to %s", model.name or type(model).__name__)
    result = await model.send(build_messages(prompt))
    if not isinstance(result, Failure):
        logger.info("Received response from %s", model.name or type(model).__name__)
    return result


def create_chat_model(config: Settings) -> ChatModel:
    if config.llm_provider == "gemini":
        return GeminiChatModel(api_key=config.gemini_api_key, model=config.gemini_model)
    return AzureOpenAIChatModel(
        endpoint=config.azure_openai_endpoint,
        api_key=config.azure_openai_api_key,
        api_version=config.azure_openai_api_version,
        deployment=config.azure_openai_deployment,
    )


_model: ChatModel | None = None


def get_chat_model() -> ChatModel:
    global _model
    if _model is None:
        _model = create_chat_model(settings)
    return _model


def reset() -> None:
    """Drop the cached client. Useful for testing."""
    global _model
    _model = None
