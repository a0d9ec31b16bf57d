"""
Modèles Pydantic pour la validation des données
"""

from .chat import ChatMessage, ChatResponse
from .lead import LeadSubmission, LeadResponse

__all__ = [
    "ChatMessage",
    "ChatResponse",
    "LeadSubmission",
    "LeadResponse",
]
