"""
Configuration centralisée pour l'application FastAPI
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Configuration de l'application"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "FAQ Chatbot & Lead Capture"
    app_version: str = "1.0.0"
    debug: bool = False

    # Groq (API compatible OpenAI)
    groq_api_key: str
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama3-70b-8192"
    llm_timeout_seconds: float = 60.0

    # Email (relais SMTP authentifié)
    email_user: str
    email_pass: str
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_timeout_seconds: float = 30.0
    # Destinataire des demandes, EMAIL_USER par défaut
    lead_recipient: Optional[str] = None

    # FAQ
    faq_file: Optional[str] = None
    faq_fuzzy_threshold: float = 0.4

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Server Configuration
    port: int = 5000

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    def get_lead_recipient(self) -> str:
        """Retourne l'adresse qui reçoit les demandes client"""
        return self.lead_recipient or self.email_user


@lru_cache()
def get_settings() -> Settings:
    """Retourne les paramètres de configuration (cached)"""
    return Settings()
