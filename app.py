# app.py
# Основной файл Flask-приложения с использованием паттерна Application Factory

import logging

from flask import Flask
from config import Config
from extensions import db, migrate

# Важно импортировать модели здесь, чтобы Alembic (Migrate) мог их видеть
from models import Festival, Option, ScheduledTask


def create_app(config_class=Config):
    # Создаем экземпляр приложения
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # --- Инициализируем расширения С ПРИЛОЖЕНИЕМ ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Регистрируем команды CLI ---
    from commands import plugin_cli

    app.cli.add_command(plugin_cli)

    return app
