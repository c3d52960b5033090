"""
Ponto de Entrada da Aplicação (Runner)

Importa a "Application Factory" (create_app) do módulo 'src'
e inicia o servidor de desenvolvimento do Flask.

Para executar o servidor:
(Com o ambiente virtual .venv ativo e AULAS_CSV_URL no .env)
$ python run.py
"""

from src import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host='0.0.0.0', port=5000, debug=app.config['DEBUG'])
