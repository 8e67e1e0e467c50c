"""LLM responder for the website chatbot.

Turns a visitor question plus a company context blob into a short,
publishable answer through the OpenAI chat completions API.
"""
import logging
import time
from typing import Any, Optional

from openai import APITimeoutError, OpenAI, OpenAIError

from answer_engine.config import Settings, settings
from answer_engine.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_TEMPLATE = """You are an AI assistant specifically designed to help website visitors with questions about the following company and website:

{context}

IMPORTANT RULES:
1. ONLY answer questions about this specific company/website based on the context provided.
2. If asked about any other company, politely explain you're here to assist with questions about THIS company/website only.
3. Respond in a helpful, professional manner that matches the company's brand voice.
4. Be concise but thorough. Try to directly answer the question using the provided context.
5. If you don't know the answer, say so and offer to connect the visitor with a human representative.
6. DO NOT make up information that is not provided in the context.
7. DO NOT refer to yourself as ChatGPT, GPT, or OpenAI - you are this company's website assistant."""


class LLMResponder:
    """
    Stateless question answerer backed by a hosted chat model.

    The API key is checked once, here; ``respond`` never re-reads config.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o",
        temperature: float = 0.2,
        max_tokens: int = 500,
        timeout: float = 30.0,
        max_retries: int = 2,
        client: Optional[Any] = None,
    ):
        if client is None:
            if not api_key:
                raise ConfigurationError("Missing OPENAI_API_KEY")
            # Retries are handled in respond() so timeouts stay bounded
            client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "LLMResponder":
        return cls(
            api_key=config.OPENAI_API_KEY,
            model=config.OPENAI_MODEL,
            temperature=config.OPENAI_TEMPERATURE,
            max_tokens=config.OPENAI_MAX_TOKENS,
            timeout=config.OPENAI_TIMEOUT,
            max_retries=config.OPENAI_MAX_RETRIES,
        )

    def build_system_prompt(self, context: str) -> str:
        return SYSTEM_PROMPT_TEMPLATE.format(context=context.strip())

    def respond(self, question: str, context: str) -> str:
        """
        Answer ``question`` using ``context`` as the only source of facts.

        Args:
            question: Visitor question, sent verbatim as the user turn
            context: Company description embedded in the system prompt

        Returns:
            The model's answer text

        Raises:
            UpstreamError: If the call fails, times out on every attempt,
                or returns no usable content
        """
        messages = [
            {"role": "system", "content": self.build_system_prompt(context)},
            {"role": "user", "content": question},
        ]

        attempt = 0
        while True:
            attempt += 1
            try:
                logger.info(f"Generating AI response for question: {question[:100]!r}")
                response = self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                    timeout=self.timeout,
                )
                break
            except APITimeoutError as e:
                if attempt >= self.max_retries:
                    logger.error(f"OpenAI timeout after {attempt} attempts: {str(e)}")
                    raise UpstreamError("AI service timed out") from e
                wait_time = 2 ** attempt
                logger.warning(
                    f"OpenAI timeout, retry {attempt}/{self.max_retries} after {wait_time}s"
                )
                time.sleep(wait_time)
            except OpenAIError as e:
                logger.error(f"OpenAI API error: {str(e)}")
                raise UpstreamError() from e

        return self._extract_content(response)

    def _extract_content(self, response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise UpstreamError("Unexpected response format from OpenAI API") from e

        if not content or not content.strip():
            raise UpstreamError("Empty response from OpenAI API")

        logger.debug(f"AI generated response (first 100 chars): {content[:100]!r}")
        return content
