"""
Módulo de Aulas (Blueprint)

Expõe a consulta "em que aula está minha turma agora?" sobre o CSV
publicado da BD_Aulas.
"""

from flask import Blueprint

aulas_bp = Blueprint(
    'aulas_bp',
    __name__,
    url_prefix='/api'
)

# Importa as rotas no final para evitar dependência circular
from . import routes
