"""
Módulo de Configuração

Define a classe de configuração principal. Implementa o padrão 'Fail Fast':
se a URL do CSV de aulas estiver faltando, a aplicação nem inicia.
"""

import os
from dotenv import load_dotenv

# Carrega variáveis do arquivo .env
load_dotenv()

class Config:
    """
    Classe de configuração base da aplicação.
    """

    # === FONTE DE AULAS (Fail Fast) ===
    # CSV publicado do Google Sheets (BD intermediária, gid=0 se houver uma só aba).
    # A planilha precisa estar compartilhada como "Qualquer pessoa com o link" (leitor).
    AULAS_CSV_URL = os.environ.get('AULAS_CSV_URL')
    if not AULAS_CSV_URL:
        raise ValueError("ERRO CRÍTICO: 'AULAS_CSV_URL' não encontrada no .env. Sem ela não há de onde ler as aulas.")

    AULAS_CACHE_TTL_SECONDS = int(os.environ.get('AULAS_CACHE_TTL_SECONDS', '60'))
    # Colunas D..M => pelo menos 13 colunas
    AULAS_MIN_COLUMNAS = int(os.environ.get('AULAS_MIN_COLUMNAS', '13'))
    AULAS_RATE_LIMIT = os.environ.get('AULAS_RATE_LIMIT', '120 per minute')

    # === MALLA (Apps Script) ===
    MALLA_APPS_SCRIPT_URL = os.environ.get('MALLA_APPS_SCRIPT_URL')
    MALLA_TOKEN = os.environ.get('MALLA_TOKEN', '')
    MALLA_CACHE_TTL_SECONDS = int(os.environ.get('MALLA_CACHE_TTL_SECONDS', '60'))

    if not MALLA_APPS_SCRIPT_URL:
        print("AVISO: 'MALLA_APPS_SCRIPT_URL' não configurada. /api/malla responderá 503.")

    # === FLASK ===
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1')

    # === LOGS & RATE LIMIT ===
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Em produção, idealmente usar Redis. Para dev/demo, memória é ok.
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_ENABLED = os.environ.get('RATELIMIT_ENABLED', 'True').lower() in ('true', '1')
