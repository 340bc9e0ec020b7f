# config.py
# Конфигурация приложения Flask

import os


def _database_uri(base_dir):
    uri = os.environ.get('DATABASE_URL')
    if uri:
        # Heroku/Render отдают старую схему postgres://
        if uri.startswith('postgres://'):
            uri = uri.replace('postgres://', 'postgresql://', 1)
        return uri
    return f'sqlite:///{os.path.join(base_dir, "instance", "festival.db")}'


class Config:
    # Абсолютный путь к базе данных
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    SQLALCHEMY_DATABASE_URI = _database_uri(BASE_DIR)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-change-me')  # Замени на случайный ключ в продакшене
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', '')

    # Имя опции, в которой хранится весь словарь настроек плагина
    SETTINGS_OPTION_KEY = 'peanut_festival_settings'
    # Префикс переменных окружения для секретных настроек
    SETTINGS_ENV_PREFIX = 'PEANUT_FESTIVAL_'


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    LOG_LEVEL = 'DEBUG'
