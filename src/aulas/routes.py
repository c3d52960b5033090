"""
Rotas do Módulo de Aulas

POST /api/aulas
- Modo único: { materia, seccion, tipo, horaInicio }
- Modo lote:  { classes: [ { key, materia, seccion, tipo, horaInicio }, ... ] }

Em qualquer modo o CSV é lido no máximo uma vez por request (via cache).
"""

from flask import current_app, jsonify, request

from . import aulas_bp
from src.core.erros import AulasError
from src.core.extensions import limiter
from src.core.logger import get_logger
from src.core.resolver import (
    ResultadoConsulta,
    montar_consulta,
    montar_pedidos_lote,
    resolver_consulta,
    resolver_lote,
)

logger = get_logger(__name__)


def _cache_aulas():
    return current_app.extensions['aulas_feed']


def _limite_aulas() -> str:
    return current_app.config.get('AULAS_RATE_LIMIT', '120 per minute')


def _responder_lote(itens: list):
    pedidos = montar_pedidos_lote(itens)
    cache = _cache_aulas()

    # Só vai ao CSV se houver ao menos uma consulta completa
    if not any(consulta.campo_faltante() is None for _, consulta in pedidos):
        resultados = {
            chave: ResultadoConsulta.campo_ausente(consulta.campo_faltante()).para_dict()
            for chave, consulta in pedidos
        }
        return jsonify({
            'ok': True,
            'fromCache': False,
            'cooldownMs': cache.ttl_restante_ms(),
            'results': resultados,
        })

    leitura = cache.get_or_refresh()
    snapshot = leitura.snapshot
    resultados = resolver_lote(pedidos, snapshot.linhas_dados, snapshot.colunas)

    encontrados = sum(1 for r in resultados.values() if r.found)
    logger.info(f"Lote de aulas: {len(resultados)} consultas, {encontrados} encontradas (cache={leitura.from_cache})")

    return jsonify({
        'ok': True,
        'fromCache': leitura.from_cache,
        'cooldownMs': leitura.ttl_restante_ms,
        'results': {chave: r.para_dict() for chave, r in resultados.items()},
    })


def _responder_unica(corpo: dict):
    consulta = montar_consulta(corpo)

    faltante = consulta.campo_faltante()
    if faltante:
        return jsonify(ResultadoConsulta.campo_ausente(faltante).para_dict()), 400

    leitura = _cache_aulas().get_or_refresh()
    snapshot = leitura.snapshot
    resultado = resolver_consulta(consulta, snapshot.linhas_dados, snapshot.colunas)

    return jsonify({
        **resultado.para_dict(),
        'fromCache': leitura.from_cache,
        'cooldownMs': leitura.ttl_restante_ms,
    })


@aulas_bp.route('/aulas', methods=['POST'])
@limiter.limit(_limite_aulas)
def consultar_aulas():
    corpo = request.get_json(silent=True)
    if not isinstance(corpo, dict):
        return jsonify({'ok': False, 'error': 'Cuerpo JSON inválido'}), 400

    try:
        if isinstance(corpo.get('classes'), list):
            return _responder_lote(corpo['classes'])
        return _responder_unica(corpo)

    except AulasError as e:
        logger.warning(f"Erro de integração com o CSV de aulas [{e.tipo.value}]: {e} ({e.debug})")
        return jsonify(e.para_dict()), e.status_http

    except Exception as e:
        logger.error(f"Erro inesperado em /api/aulas: {e}", exc_info=True)
        return jsonify({'ok': False, 'error': 'Error inesperado', 'debug': ''}), 500
