"""Shared dependencies for API routes."""

from services.llm_client import ChatModel, get_chat_model


def get_model() -> ChatModel:
    return get_chat_model()
