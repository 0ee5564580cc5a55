"""LLM module for gpt-auto-commit.

Turns a staged diff into a one-line commit message through the OpenAI
chat completion API. The key and model come from ~/.gpt-auto-commit/config.yaml.
"""

from typing import Optional

from dotenv import load_dotenv

from gpt_auto_commit.config import FALLBACK_COMMIT_MESSAGE
from gpt_auto_commit.global_config import ConfigStore, get_config
from gpt_auto_commit.llm.base import (
    BaseLLMProvider,
    LLMResult,
    resolve_api_key,
)
from gpt_auto_commit.llm.exceptions import LLMError, MissingAPIKeyError
from gpt_auto_commit.terminal import loading_spinner

# Load environment variables from .env file
load_dotenv()


def get_provider(
    store: Optional[ConfigStore] = None,
    fallback_message: str = FALLBACK_COMMIT_MESSAGE,
) -> BaseLLMProvider:
    """Get a provider configured from the config store.

    Args:
        store: The config store to read (defaults to the global one).
        fallback_message: Message used when the model returns no text.

    Returns:
        An OpenAIProvider for the configured model.

    Raises:
        MissingAPIKeyError: If no API key is configured.
    """
    from gpt_auto_commit.llm.openai_provider import OpenAIProvider

    config = get_config(store)
    api_key = resolve_api_key(config)
    return OpenAIProvider(
        api_key=api_key,
        model=config.model,
        fallback_message=fallback_message,
    )


def generate_commit_message(
    diff: str,
    store: Optional[ConfigStore] = None,
    fallback_message: str = FALLBACK_COMMIT_MESSAGE,
) -> str:
    """Generate a commit message for the staged diff.

    This is the main entry point for message generation. The API key is
    checked before any request is made.

    Args:
        diff: The cleaned staged diff.
        store: The config store to read (defaults to the global one).
        fallback_message: Message used when the model returns no text.

    Returns:
        The single-line commit message, stripped of surrounding whitespace.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        LLMError: If the request fails.
    """
    provider = get_provider(store, fallback_message=fallback_message)

    with loading_spinner():
        result: LLMResult = provider.generate(diff)

    return result.message


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "LLMResult",
    "get_provider",
    "generate_commit_message",
]
