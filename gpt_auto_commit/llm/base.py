"""Base classes and shared utilities for LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from gpt_auto_commit.config import API_KEY_ENV_VAR, FALLBACK_COMMIT_MESSAGE
from gpt_auto_commit.global_config import Config
from gpt_auto_commit.llm.exceptions import MissingAPIKeyError


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    message: str
    model: str
    input_tokens: int
    output_tokens: int


# System prompt for the LLM
SYSTEM_PROMPT = (
    "You are a helpful assistant that generates clear and concise git commit messages. "
    "Follow conventional commits format. Focus on the main changes and their purpose. "
    "Only return a single-line commit message with no additional details, bullet points, "
    "or descriptions."
)

# User prompt template, the diff is passed as is
USER_PROMPT_TEMPLATE = """Changes:

{diff}"""


def resolve_api_key(config: Config) -> str:
    """Get the API key from the config, falling back to the environment.

    Checks in order:
    1. api_key in ~/.gpt-auto-commit/config.yaml
    2. OPENAI_API_KEY environment variable (including a loaded .env file)

    Args:
        config: The current configuration.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If no key is found.
    """
    if config.api_key:
        return config.api_key

    api_key = os.getenv(API_KEY_ENV_VAR)
    if api_key:
        return api_key

    raise MissingAPIKeyError(
        "No API key found. Please set your OpenAI API key first:\n"
        "  gpt-auto-commit config --key YOUR_API_KEY"
    )


def build_messages(diff: str) -> list[dict[str, str]]:
    """Build the system and user messages for a diff.

    Args:
        diff: The cleaned staged diff.

    Returns:
        The chat messages, system instruction first.
    """
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(diff=diff)},
    ]


def extract_message(raw_response: str | None, fallback: str = FALLBACK_COMMIT_MESSAGE) -> str:
    """Turn the model's text into a commit message.

    Args:
        raw_response: The text of the first choice, if any.
        fallback: Message used when the text is missing or blank.

    Returns:
        The stripped text, or the fallback.
    """
    message = (raw_response or "").strip()
    return message or fallback


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate(self, diff: str) -> LLMResult:
        """Generate a commit message from the staged diff.

        Args:
            diff: The cleaned staged diff.

        Returns:
            An LLMResult containing the commit message and metadata.

        Raises:
            LLMError: If the request fails.
        """
        pass
