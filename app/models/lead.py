"""
Modèles pour la capture de demandes client
"""
from pydantic import BaseModel, Field
from typing import Optional


class LeadSubmission(BaseModel):
    """Formulaire de demande client (aucune validation de format)"""
    name: str = Field("", description="Nom du client")
    email: str = Field("", description="Email du client")
    message: str = Field("", description="Besoin exprimé")


class LeadResponse(BaseModel):
    """Accusé de traitement de la demande"""
    success: bool
    message: str
    error: Optional[str] = None
