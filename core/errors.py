"""
Exceptions métier du backend
"""


class BackendError(Exception):
    """Erreur de base pour les collaborateurs externes et le chargement des données"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FAQLoadError(BackendError):
    """Le fichier FAQ est introuvable ou mal formé"""


class CompletionError(BackendError):
    """L'appel à l'API de complétion a échoué"""


class MailDeliveryError(BackendError):
    """Le relais SMTP a refusé ou n'a pas pu transmettre le message"""
