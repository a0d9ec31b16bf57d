"""
Chargement de la liste FAQ statique
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from core.errors import FAQLoadError


logger = logging.getLogger(__name__)

DEFAULT_FAQ_FILE = Path(__file__).resolve().parent / "data" / "faqs.json"


@dataclass(frozen=True)
class FAQEntry:
    """Couple question / réponse de la FAQ"""
    question: str
    answer: str


def load_faqs(path: Optional[Union[str, Path]] = None) -> Tuple[FAQEntry, ...]:
    """
    Charge la FAQ depuis un fichier JSON (liste d'objets question/answer).

    Args:
        path: Chemin du fichier, fichier embarqué par défaut

    Returns:
        Tuple[FAQEntry, ...]: Entrées dans l'ordre du fichier

    Raises:
        FAQLoadError: Fichier absent, JSON invalide ou entrée incomplète
    """
    faq_path = Path(path) if path else DEFAULT_FAQ_FILE

    try:
        with open(faq_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise FAQLoadError(f"FAQ file not found: {faq_path}") from e
    except json.JSONDecodeError as e:
        raise FAQLoadError(f"Invalid JSON in FAQ file {faq_path}: {e}") from e

    if not isinstance(raw, list):
        raise FAQLoadError(f"FAQ file {faq_path} must contain a list")

    entries = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise FAQLoadError(f"FAQ entry #{position} is not an object")

        question = item.get("question")
        answer = item.get("answer")
        if not isinstance(question, str) or not isinstance(answer, str):
            raise FAQLoadError(f"FAQ entry #{position} needs string 'question' and 'answer'")

        entries.append(FAQEntry(question=question, answer=answer))

    logger.info("Loaded %d FAQ entries from %s", len(entries), faq_path)
    return tuple(entries)
