"""
Modèles pour le chat
"""
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Message de l'utilisateur, transmis tel quel"""
    message: str = Field("", description="Contenu du message")


class ChatResponse(BaseModel):
    """Réponse du bot"""
    answer: str
