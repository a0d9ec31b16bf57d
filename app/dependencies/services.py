"""
Dépendances vers les services partagés
"""
from fastapi import Request

from core.mailer import LeadMailer
from core.resolvers import ResolverChain


def get_resolver_chain(request: Request) -> ResolverChain:
    """
    Retourne la chaîne de résolution construite au démarrage

    Args:
        request: Requête FastAPI

    Returns:
        ResolverChain: Instance partagée, en lecture seule
    """
    return request.app.state.resolver_chain


def get_lead_mailer(request: Request) -> LeadMailer:
    """Retourne le client SMTP configuré avec les paramètres de l'application"""
    return LeadMailer.from_settings(request.app.state.settings)
