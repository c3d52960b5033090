"""
Módulo da Malla Curricular (Blueprint)

Proxy server-side para a BD_Malla via Web App do Apps Script. Mantém o link
do script fora do frontend e cacheia as respostas por carrera/plan.
"""

from flask import Blueprint

malla_bp = Blueprint(
    'malla_bp',
    __name__,
    url_prefix='/api'
)

from . import routes
