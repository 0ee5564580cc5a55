"""OpenAI GPT provider implementation."""

from openai import OpenAI

from gpt_auto_commit.config import DEFAULT_MODEL, FALLBACK_COMMIT_MESSAGE, MAX_TOKENS
from gpt_auto_commit.llm.base import (
    BaseLLMProvider,
    LLMResult,
    build_messages,
    extract_message,
)
from gpt_auto_commit.llm.exceptions import LLMError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI chat completion provider."""

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        max_tokens: int = MAX_TOKENS,
        fallback_message: str = FALLBACK_COMMIT_MESSAGE,
    ):
        """Initialize the OpenAI provider.

        Args:
            api_key: The OpenAI API key.
            model: The model to use. Defaults to DEFAULT_MODEL from config.
            max_tokens: Cap on output tokens.
            fallback_message: Message used when the model returns no text.
        """
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.max_tokens = max_tokens
        self.fallback_message = fallback_message

    def generate(self, diff: str) -> LLMResult:
        """Generate a commit message using OpenAI.

        Args:
            diff: The cleaned staged diff.

        Returns:
            An LLMResult containing the commit message and metadata.

        Raises:
            LLMError: If the API call fails.
        """
        client = OpenAI(api_key=self.api_key)

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=build_messages(diff),
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            raise LLMError(f"OpenAI API call failed: {e}")

        raw_response = None
        if response.choices and response.choices[0].message is not None:
            raw_response = response.choices[0].message.content

        input_tokens = 0
        output_tokens = 0
        if response.usage is not None:
            input_tokens = response.usage.prompt_tokens
            output_tokens = response.usage.completion_tokens

        return LLMResult(
            message=extract_message(raw_response, self.fallback_message),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
