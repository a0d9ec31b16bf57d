"""
Configuration centralisée pour le système de logging
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional


def get_logging_config(level: str = "INFO", log_file: Optional[str] = None) -> dict:
    """
    Retourne la configuration complète du système de logging

    Args:
        level: Niveau de log des loggers de l'application
        log_file: Fichier de log rotatif, console seule si None
    """
    level = level.upper()
    handlers = ['console']

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(funcName)s:%(lineno)d - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'simple',
                'stream': 'ext://sys.stdout'
            },
        },
        'loggers': {},
    }

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': str(log_path),
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 5,
            'encoding': 'utf-8',
            'formatter': 'detailed',
            'level': 'DEBUG'
        }
        handlers.append('file')

    config['loggers'] = {
        # Root logger
        '': {
            'handlers': handlers,
            'level': level,
        },
        'app': {
            'handlers': handlers,
            'level': level,
            'propagate': False
        },
        'core': {
            'handlers': handlers,
            'level': level,
            'propagate': False
        },
        # Bibliothèques externes
        'httpx': {
            'handlers': handlers,
            'level': 'WARNING',
            'propagate': False
        },
        'openai': {
            'handlers': handlers,
            'level': 'WARNING',
            'propagate': False
        },
    }

    return config


def setup_logging_from_config(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure le système de logging à partir de la configuration
    """
    logging.config.dictConfig(get_logging_config(level, log_file))

    logger = logging.getLogger('app')
    logger.info("Logging configured (level=%s, file=%s)", level.upper(), log_file or "-")

    return logger
