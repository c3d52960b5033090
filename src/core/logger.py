"""
Logging da API de Aulas e Malla.

Tudo vai para o stdout (é o que o Cloud Run / Vercel coletam): cargas do
CSV de aulas, hits do cache, erros de integração com as planilhas e com o
Apps Script. O nível vem de LOG_LEVEL.
"""

import logging
import os
import sys

FORMATO = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """
    Logger do módulo com handler único para stdout.

    Args:
        name (str): geralmente __name__ ("src.core.feed", "src.aulas.routes"...).
    """
    logger = logging.getLogger(name)

    # Chamadas repetidas (ex.: create_app nos testes) não duplicam handlers
    if logger.handlers:
        return logger

    nivel = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, nivel, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATO))
    logger.addHandler(handler)
    # Sem propagar para o root: o werkzeug já loga no root e duplicaria as linhas
    logger.propagate = False

    return logger
