# utils.py
# Вспомогательные функции: нормализация строк и текущее время сервера

import re
import unicodedata
from datetime import datetime

_NON_WORD = re.compile(r'[\W_]+')


def slugify(text):
    """
    Превращает название в slug: 'Peanut Festival 2025!' -> 'peanut-festival-2025'.
    Детерминирована и идемпотентна: slugify(slugify(x)) == slugify(x).
    """
    if text is None:
        return ''
    normalized = unicodedata.normalize('NFKD', str(text))
    # Убираем диакритику (é -> e), кириллица и прочие буквы остаются
    normalized = ''.join(ch for ch in normalized if not unicodedata.combining(ch))
    normalized = normalized.lower().replace("'", '').replace('’', '')
    return _NON_WORD.sub('-', normalized).strip('-')


def current_time():
    # Точность до секунды, как у DATETIME в MySQL
    return datetime.now().replace(microsecond=0)
