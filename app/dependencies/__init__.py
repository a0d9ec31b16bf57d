"""
Dépendances FastAPI pour l'application
"""

from .services import get_resolver_chain, get_lead_mailer

__all__ = [
    "get_resolver_chain",
    "get_lead_mailer",
]
