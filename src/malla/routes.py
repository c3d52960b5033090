"""
Rotas do Módulo da Malla

GET /api/malla?carrera=...&plan=...
"""

from flask import current_app, jsonify, request

from . import malla_bp
from src.core.erros import AulasError
from src.core.logger import get_logger

logger = get_logger(__name__)


def _json(dados: dict, status: int = 200):
    resposta = jsonify(dados)
    resposta.status_code = status
    resposta.headers['Cache-Control'] = 'no-store'
    return resposta


@malla_bp.route('/malla', methods=['GET'])
def obter_malla():
    carrera = (request.args.get('carrera') or '').strip()
    plan = (request.args.get('plan') or '').strip()

    if not carrera or not plan:
        return _json({'ok': False, 'error': 'Faltan parámetros: carrera y plan'}, 400)

    servico = current_app.extensions.get('malla')
    if servico is None:
        return _json({'ok': False, 'error': 'MALLA_APPS_SCRIPT_URL no configurada'}, 503)

    try:
        payload, em_cache = servico.obter(carrera, plan)
        return _json({'ok': True, 'cached': em_cache, **payload})

    except AulasError as e:
        logger.warning(f"Erro ao ler a malla {carrera}/{plan}: {e}")
        return _json({'ok': False, 'error': e.mensagem, 'debug': e.debug}, e.status_http)

    except Exception as e:
        logger.error(f"Erro inesperado em /api/malla: {e}", exc_info=True)
        return _json({'ok': False, 'error': 'Error inesperado'}, 500)
