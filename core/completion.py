"""
Client de complétion Groq (API compatible OpenAI)
"""
import logging
from typing import Optional

from openai import AsyncOpenAI, APIStatusError, OpenAIError

from core.errors import CompletionError


logger = logging.getLogger(__name__)

NO_ANSWER_FALLBACK = "Sorry, no answer found."


class CompletionClient:
    """
    Envoie un message utilisateur unique à l'API de complétion
    et retourne le texte du premier choix.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        # Pas de retry : un échec est remonté immédiatement
        self.client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    @classmethod
    def from_settings(cls, settings) -> "CompletionClient":
        """Construit le client depuis la configuration"""
        return cls(
            api_key=settings.groq_api_key,
            model=settings.groq_model,
            base_url=settings.groq_base_url,
            timeout=settings.llm_timeout_seconds,
        )

    async def complete(self, message: str) -> str:
        """
        Transmet le message tel quel comme tour utilisateur.

        Args:
            message: Texte brut de l'utilisateur

        Returns:
            str: Contenu du premier choix, ou NO_ANSWER_FALLBACK si la
            réponse n'a pas la forme attendue

        Raises:
            CompletionError: Erreur réseau, statut non-2xx ou corps illisible
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": message}],
            )
        except APIStatusError as e:
            logger.error("Completion API error %s: %s", e.status_code, e.body)
            raise CompletionError(f"Completion API returned HTTP {e.status_code}") from e
        except OpenAIError as e:
            logger.error("Completion API error: %s", e)
            raise CompletionError(f"Completion API call failed: {e}") from e

        return extract_answer(response)


def extract_answer(response) -> str:
    """Retourne le texte du premier choix ou le message par défaut"""
    choices = getattr(response, "choices", None)
    if not choices:
        return NO_ANSWER_FALLBACK

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str) or not content:
        return NO_ANSWER_FALLBACK

    return content
