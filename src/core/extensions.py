"""
Módulo Central de Extensões.
Evita importações circulares centralizando as instâncias das extensões.
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Rate Limiting. O storage e o enable vêm do app.config (RATELIMIT_*).
limiter = Limiter(key_func=get_remote_address)
