# settings.py
# Настройки плагина: один словарь, который целиком читается и целиком сохраняется
# в хранилище опций. Блокировок нет: при гонке побеждает последняя запись.

import base64
import binascii
import os

from flask import current_app, g

from interfaces import OptionStore
from options import Options

OPTION_KEY = 'peanut_festival_settings'
ENV_PREFIX = 'PEANUT_FESTIVAL_'

# Секретные ключи можно задать переменной окружения PEANUT_FESTIVAL_<KEY>.
# Переменная окружения важнее значения из базы.
SENSITIVE_KEYS = (
    'firebase_api_key',
    'firebase_project_id',
    'firebase_database_url',
    'firebase_service_account',
    'firebase_vapid_key',
    'stripe_secret_key',
    'stripe_publishable_key',
    'stripe_webhook_secret',
    'eventbrite_api_key',
    'eventbrite_client_id',
    'eventbrite_client_secret',
    'eventbrite_webhook_secret',
    'mailchimp_api_key',
    'booker_api_url',
    'booker_api_key',
)

# Значения по умолчанию, которые ставятся при активации плагина
DEFAULT_SETTINGS = {
    'active_festival_id': None,
    'eventbrite_token': '',
    'eventbrite_org_id': '',
    'mailchimp_api_key': '',
    'mailchimp_list_id': '',
    'voting_weight_first': 3,
    'voting_weight_second': 2,
    'voting_weight_third': 1,
    'notification_email': '',
}

ACTIVE_FESTIVAL_KEY = 'active_festival_id'


class Settings:

    def __init__(self, options: OptionStore, option_key=OPTION_KEY, env_prefix=ENV_PREFIX, environ=None):
        self.options = options
        self.option_key = option_key
        self.env_prefix = env_prefix
        self.environ = os.environ if environ is None else environ

    def _load(self):
        return dict(self.options.get_option(self.option_key, {}) or {})

    def get(self, key='', default=None):
        """
        Без ключа возвращает весь сохраненный словарь (значения из окружения
        в него не подмешиваются). С ключом: сначала окружение для секретных
        ключей, затем база, затем default. Ключ со значением None
        считается отсутствующим.
        """
        if not key:
            return self._load()

        if self.is_sensitive(key):
            env_value = self._get_from_env(key)
            if env_value is not None:
                return env_value

        # Как и в исходном плагине: сохраненный None тоже дает default
        value = self._load().get(key)
        return default if value is None else value

    def set(self, key, value):
        settings = self._load()
        settings[key] = value
        return self.options.update_option(self.option_key, settings)

    def update(self, values):
        settings = self._load()
        settings.update(values)
        return self.options.update_option(self.option_key, settings)

    def delete(self, key):
        settings = self._load()
        settings.pop(key, None)
        return self.options.update_option(self.option_key, settings)

    # --- Активный фестиваль ---

    def get_active_festival_id(self):
        festival_id = self.get(ACTIVE_FESTIVAL_KEY)
        return int(festival_id) if festival_id else None

    def set_active_festival_id(self, festival_id):
        return self.set(ACTIVE_FESTIVAL_KEY, int(festival_id) if festival_id is not None else None)

    # --- Переменные окружения ---

    def _get_from_env(self, key):
        value = self.environ.get(self.get_env_name(key))
        if value is None:
            return None

        # Сервисный аккаунт Firebase можно передать в base64
        if key == 'firebase_service_account' and not value.startswith('{'):
            try:
                decoded = base64.b64decode(value, validate=True).decode('utf-8')
            except (binascii.Error, UnicodeDecodeError):
                return value
            if decoded.startswith('{'):
                return decoded

        return value

    def is_sensitive(self, key):
        return key in SENSITIVE_KEYS

    def is_from_env(self, key):
        if not self.is_sensitive(key):
            return False
        return self._get_from_env(key) is not None

    def get_env_name(self, key):
        return self.env_prefix + key.upper()

    def get_sensitive_keys(self):
        return list(SENSITIVE_KEYS)

    def get_env_status(self):
        """Для админки: какие секретные ключи заданы через окружение."""
        return {key: self.is_from_env(key) for key in SENSITIVE_KEYS}


def get_settings():
    """Настройки в рамках текущего контекста приложения."""
    if 'settings' not in g:
        g.settings = Settings(
            Options(),
            option_key=current_app.config.get('SETTINGS_OPTION_KEY', OPTION_KEY),
            env_prefix=current_app.config.get('SETTINGS_ENV_PREFIX', ENV_PREFIX),
        )
    return g.settings
