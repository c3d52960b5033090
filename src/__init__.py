"""
Módulo Principal da Aplicação (Application Factory)
"""

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix # Necessário atrás do proxy do Cloud Run/Vercel
from config import Config

from .core.cache import FeedCache
from .core.extensions import limiter
from .core.feed import FonteAulas
from .malla.services import MallaService

def create_app(config_class=Config):
    """
    Cria e configura uma instância da aplicação Flask.
    """

    app = Flask(__name__, instance_relative_config=True)

    # Garante URLs com 'https://' atrás do proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    # 1. Carrega a configuração
    app.config.from_object(config_class)
    app.json.ensure_ascii = False # Acentos e ícones de estado legíveis no JSON

    # 2. Rate limiting
    limiter.init_app(app)

    # 3. Serviços (um por app, substituíveis nos testes)
    fonte = FonteAulas(app.config['AULAS_CSV_URL'], min_colunas=app.config['AULAS_MIN_COLUMNAS'])
    app.extensions['aulas_feed'] = FeedCache(fonte.carregar, ttl_segundos=app.config['AULAS_CACHE_TTL_SECONDS'])

    if app.config.get('MALLA_APPS_SCRIPT_URL'):
        app.extensions['malla'] = MallaService(
            app.config['MALLA_APPS_SCRIPT_URL'],
            token=app.config.get('MALLA_TOKEN', ''),
            ttl_segundos=app.config['MALLA_CACHE_TTL_SECONDS'],
        )

    # 4. Configura os Blueprints (Módulos)
    from .aulas import aulas_bp
    app.register_blueprint(aulas_bp)

    from .malla import malla_bp
    app.register_blueprint(malla_bp)

    # 5. Rota de Health Check
    @app.route("/health")
    def health_check():
        return "Servidor Aulas no ar!", 200

    return app
