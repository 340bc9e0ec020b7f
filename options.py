# options.py
# Хранилище именованных опций (ключ -> произвольное Python-значение) в таблице options

import logging
import pickle

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import Option

logger = logging.getLogger(__name__)

# Ошибки, которыми pickle отвечает на битую запись
_UNPICKLE_ERRORS = (pickle.UnpicklingError, EOFError, ValueError, TypeError, AttributeError, ImportError)

_MISSING = object()


class Options:

    def get_option(self, name, default=None):
        """Чтение не падает: битая запись логируется и дает default."""
        try:
            option = Option.query.filter_by(name=name).first()
        except (SQLAlchemyError,) + _UNPICKLE_ERRORS as e:
            db.session.rollback()
            logger.error("Не удалось прочитать опцию '%s': %s", name, e)
            return default
        if option is None:
            return default
        return option.value

    def update_option(self, name, value):
        """
        Сохраняет значение целиком, создавая опцию при необходимости.
        Возвращает False и когда запись не удалась, и когда значение не изменилось.
        """
        try:
            pickle.dumps(value)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            logger.error("Опция '%s' не сериализуется: %s", name, e)
            return False

        current = self.get_option(name, _MISSING)
        if current is not _MISSING and current == value:
            return False

        try:
            exists = db.session.query(Option.id).filter_by(name=name).first() is not None
            if exists:
                # Перезаписываем и битую запись, которую get_option не смог прочитать
                Option.query.filter_by(name=name).update({'value': value}, synchronize_session=False)
            else:
                db.session.add(Option(name=name, value=value))
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Не удалось сохранить опцию '%s': %s", name, e)
            return False

    def add_option(self, name, value):
        """Создает опцию, только если ее еще нет. Существующее значение не трогает."""
        if db.session.query(Option.id).filter_by(name=name).first() is not None:
            return False
        return self.update_option(name, value)

    def delete_option(self, name):
        try:
            deleted = Option.query.filter_by(name=name).delete(synchronize_session=False)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Не удалось удалить опцию '%s': %s", name, e)
            return False
        return deleted > 0
