"""
Chaîne de résolution des réponses du chatbot

Ordre : correspondance exacte, correspondance approchée, puis API de complétion.
La première réponse non nulle l'emporte.
"""
import logging
from typing import Dict, Optional, Sequence

from rapidfuzz import fuzz, process, utils

from core.completion import CompletionClient, NO_ANSWER_FALLBACK
from core.faq_store import FAQEntry


logger = logging.getLogger(__name__)

DEFAULT_FUZZY_THRESHOLD = 0.4


def normalize_question(text: str) -> str:
    return (text or "").strip().lower()


class Resolver:
    """Interface commune : retourne une réponse ou None"""

    name = "base"

    async def resolve(self, message: str) -> Optional[str]:
        raise NotImplementedError


class ExactMatchResolver(Resolver):
    """Égalité insensible à la casse et aux espaces en bordure"""

    name = "exact"

    def __init__(self, entries: Sequence[FAQEntry]):
        self._answers: Dict[str, str] = {}
        for entry in entries:
            # La première entrée gagne en cas de doublon
            self._answers.setdefault(normalize_question(entry.question), entry.answer)

    async def resolve(self, message: str) -> Optional[str]:
        return self._answers.get(normalize_question(message))


def keyword_score(query: str, choice: str, **kwargs) -> float:
    """Similarité globale ou partielle (sous-chaîne), la plus haute des deux"""
    return max(fuzz.ratio(query, choice), fuzz.partial_ratio(query, choice))


class FuzzyMatchResolver(Resolver):
    """
    Recherche approchée sur les questions de la FAQ.

    Le seuil suit la convention d'une distance entre 0 (identique) et 1
    (n'importe quoi) ; un candidat est retenu si son score de similarité
    atteint (1 - seuil) * 100. Le score retient la meilleure valeur entre la
    comparaison globale et la recherche de sous-chaîne, de sorte qu'un mot-clé
    seul ("services") trouve la question qui le contient.
    """

    name = "fuzzy"

    def __init__(self, entries: Sequence[FAQEntry], threshold: float = DEFAULT_FUZZY_THRESHOLD):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")

        self._entries = tuple(entries)
        # Index pré-calculé une seule fois
        self._choices = [utils.default_process(entry.question) for entry in self._entries]
        self.score_cutoff = (1.0 - threshold) * 100

    async def resolve(self, message: str) -> Optional[str]:
        query = utils.default_process(message or "")
        if not query or not self._choices:
            return None

        match = process.extractOne(
            query,
            self._choices,
            scorer=keyword_score,
            processor=None,
            score_cutoff=self.score_cutoff,
        )
        if match is None:
            return None

        _, score, index = match
        logger.debug("Fuzzy FAQ match #%d (score %.1f)", index, score)
        return self._entries[index].answer


class CompletionResolver(Resolver):
    """Délègue à l'API de complétion ; répond toujours"""

    name = "completion"

    def __init__(self, client: CompletionClient):
        self.client = client

    async def resolve(self, message: str) -> Optional[str]:
        return await self.client.complete(message)


class ResolverChain:
    """Applique les résolveurs dans l'ordre et s'arrête au premier résultat"""

    def __init__(self, resolvers: Sequence[Resolver]):
        self.resolvers = tuple(resolvers)

    async def resolve(self, message: str) -> str:
        for resolver in self.resolvers:
            answer = await resolver.resolve(message)
            if answer is not None:
                logger.info("Answer resolved by '%s' resolver", resolver.name)
                return answer

        logger.info("No resolver produced an answer")
        return NO_ANSWER_FALLBACK


def build_resolver_chain(
    entries: Sequence[FAQEntry],
    completion_client: Optional[CompletionClient],
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> ResolverChain:
    """
    Construit la chaîne standard exact -> approché -> complétion.

    Args:
        entries: Entrées FAQ chargées au démarrage
        completion_client: Client de repli, omis si None
        fuzzy_threshold: Distance maximale tolérée (0 à 1)

    Returns:
        ResolverChain: Chaîne partagée par toutes les requêtes
    """
    resolvers = [
        ExactMatchResolver(entries),
        FuzzyMatchResolver(entries, threshold=fuzzy_threshold),
    ]
    if completion_client is not None:
        resolvers.append(CompletionResolver(completion_client))

    return ResolverChain(resolvers)
