"""
LLM Client for Google Gemini integration.

This module provides a clean interface to Gemini for the AI operation.
It handles:
- API client initialization
- Prompt construction and generation settings
- Answer extraction from the candidates/content/parts path
- Mapping every provider failure to AIUnavailable
"""
import google.generativeai as genai

from qualifier.core.config import Settings
from qualifier.core.exceptions import AIUnavailable, InternalError, InvalidRequest
from qualifier.core.logging_config import get_logger

logger = get_logger(__name__)

SHORT_ANSWER_PROMPT = (
    "Answer the following question with a single word or very brief phrase "
    "(maximum 2-3 words): "
)


class LLMClient:
    """
    Client for asking Gemini short factual questions.

    Example:
        >>> client = LLMClient(settings)
        >>> client.ask("What is the capital of France?")
        'Paris'
    """

    def __init__(self, settings: Settings):
        """
        Initialize the client from application settings.

        Args:
            settings: Application settings carrying the key and model options
        """
        self.api_key = settings.gemini_api_key
        self.model_name = settings.llm_model
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens
        self.timeout = settings.ai_timeout_seconds

        if self.api_key:
            genai.configure(api_key=self.api_key)
            logger.info(f"Gemini client initialized (model={self.model_name})")
        else:
            logger.warning("GEMINI_API_KEY not set; AI operation will fail")

    def ask(self, question: str) -> str:
        """
        Ask a question and return the model's short answer.

        Args:
            question: Natural language question

        Returns:
            First candidate's first text part, stripped

        Raises:
            InvalidRequest: If the question is blank
            InternalError: If no API key is configured
            AIUnavailable: If the call fails or the response has no answer
        """
        if not question or not question.strip():
            raise InvalidRequest("Question must be a non-empty string", field="AI")

        if not self.api_key:
            logger.error("AI query rejected: GEMINI_API_KEY not configured")
            raise InternalError()

        logger.info(f"Querying Gemini: question_length={len(question)}")

        try:
            response = self._generate(SHORT_ANSWER_PROMPT + question)
            answer = response.candidates[0].content.parts[0].text.strip()
        except Exception as e:
            logger.error(f"Gemini request failed: {type(e).__name__}: {e}")
            raise AIUnavailable() from e

        logger.debug(f"Gemini answered: {answer!r}")
        return answer

    def _generate(self, prompt: str):
        """Execute a single generateContent request."""
        model_instance = genai.GenerativeModel(model_name=self.model_name)

        generation_config = genai.types.GenerationConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
        )

        return model_instance.generate_content(
            prompt,
            generation_config=generation_config,
            request_options={"timeout": self.timeout},
        )
