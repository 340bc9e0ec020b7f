# database.py
# Универсальный помощник для таблиц плагина: insert/update/delete/select/count
# поверх Flask-SQLAlchemy. Ошибки не выбрасываются наружу: операция
# откатывается, логируется, а вызывающий получает None (или [] / 0 для чтения).

import json
import logging
import re
from datetime import date, datetime

from sqlalchemy.exc import SQLAlchemyError

from extensions import db, db_error
from models import Festival
from utils import current_time

logger = logging.getLogger(__name__)

# Таблицы, с которыми разрешено работать через этот помощник
VALID_TABLES = {
    'festivals': Festival,
}

_COLUMN_NAME = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')

# Эти ключи никогда не попадают в лог
_REDACTED_KEYS = ('password', 'api_key', 'secret')


class Database:

    def __init__(self, tables=None):
        self.tables = dict(VALID_TABLES if tables is None else tables)

    # --- Валидация ---

    def _model(self, operation, table, context):
        model = self.tables.get(table)
        if model is None:
            self._log_error(operation, table, context, 'Invalid table name')
        return model

    def _validate_columns(self, operation, table, model, columns):
        known = model.__table__.columns
        for column in columns:
            if not isinstance(column, str) or not _COLUMN_NAME.match(column) or column not in known:
                self._log_error(operation, table, {'columns': list(columns)}, 'Invalid column name detected')
                return False
        return True

    def _coerce(self, model, data):
        """Строки ISO-формата в колонках Date/DateTime превращаются в объекты дат."""
        values = {}
        for key, value in data.items():
            column = model.__table__.columns[key]
            if isinstance(value, str):
                try:
                    python_type = column.type.python_type
                except NotImplementedError:
                    python_type = None
                if python_type is datetime:
                    value = datetime.fromisoformat(value)
                elif python_type is date:
                    value = date.fromisoformat(value)
            values[key] = value
        return values

    def _filter(self, model, where):
        conditions = []
        for column, value in where.items():
            attr = getattr(model, column)
            if isinstance(value, (list, tuple, set)):
                # Пустой список не ограничивает выборку
                if not value:
                    continue
                conditions.append(attr.in_(list(value)))
            else:
                conditions.append(attr == value)
        return model.query.filter(*conditions)

    def _log_error(self, operation, table, context, error):
        entry = {
            'timestamp': current_time().isoformat(sep=' '),
            'plugin': 'peanut-festival',
            'operation': operation,
            'table': table,
            'error': error,
            'context': {k: v for k, v in context.items() if k not in _REDACTED_KEYS},
        }
        logger.error('Peanut Festival DB Error: %s', json.dumps(entry, default=str))
        db_error.send(self, entry=entry)

    # --- Запись ---

    def insert(self, table, data):
        """Вставляет строку. Возвращает id новой строки или None при ошибке."""
        model = self._model('insert', table, {'data_keys': list(data)})
        if model is None or not self._validate_columns('insert', table, model, data.keys()):
            return None

        try:
            row = model(**self._coerce(model, data))
            db.session.add(row)
            db.session.commit()
            return row.id
        except (SQLAlchemyError, ValueError) as e:
            db.session.rollback()
            self._log_error('insert', table, {'data_keys': list(data)}, str(e))
            return None

    def update(self, table, data, where):
        """Обновляет только переданные колонки. Возвращает число затронутых строк или None."""
        context = {'data_keys': list(data), 'where_keys': list(where)}
        model = self._model('update', table, context)
        if model is None:
            return None
        if not data or not where:
            self._log_error('update', table, context, 'Empty data or where clause')
            return None
        if not self._validate_columns('update', table, model, list(data) + list(where)):
            return None

        try:
            affected = self._filter(model, where).update(self._coerce(model, data), synchronize_session=False)
            db.session.commit()
            return affected
        except (SQLAlchemyError, ValueError) as e:
            db.session.rollback()
            self._log_error('update', table, context, str(e))
            return None

    def delete(self, table, where):
        """Удаляет строки без возможности восстановления. Возвращает число удаленных или None."""
        context = {'where_keys': list(where)}
        model = self._model('delete', table, context)
        if model is None:
            return None
        if not where:
            self._log_error('delete', table, context, 'Empty where clause')
            return None
        if not self._validate_columns('delete', table, model, where.keys()):
            return None

        try:
            affected = self._filter(model, where).delete(synchronize_session=False)
            db.session.commit()
            return affected
        except SQLAlchemyError as e:
            db.session.rollback()
            self._log_error('delete', table, context, str(e))
            return None

    # --- Чтение ---

    def get_row(self, table, where):
        model = self._model('get_row', table, {'where_keys': list(where)})
        if model is None or not self._validate_columns('get_row', table, model, where.keys()):
            return None

        try:
            row = self._filter(model, where).first()
        except SQLAlchemyError as e:
            db.session.rollback()
            self._log_error('get_row', table, {'where_keys': list(where)}, str(e))
            return None
        return row.to_dict() if row is not None else None

    def get_results(self, table, where=None, order_by='id', order='DESC', limit=0, offset=0):
        where = where or {}
        context = {'where_keys': list(where), 'order_by': order_by, 'limit': limit, 'offset': offset}
        model = self._model('get_results', table, context)
        if model is None or not self._validate_columns('get_results', table, model, list(where) + [order_by]):
            return []

        column = getattr(model, order_by)
        # Все, что не ASC, считаем DESC
        direction = column.asc() if str(order).upper() == 'ASC' else column.desc()
        query = self._filter(model, where).order_by(direction)

        limit, offset = int(limit or 0), int(offset or 0)
        if limit > 0:
            query = query.limit(limit)
            if offset > 0:
                query = query.offset(offset)

        try:
            return [row.to_dict() for row in query.all()]
        except SQLAlchemyError as e:
            db.session.rollback()
            self._log_error('get_results', table, context, str(e))
            return []

    def count(self, table, where=None):
        where = where or {}
        model = self._model('count', table, {'where_keys': list(where)})
        if model is None or not self._validate_columns('count', table, model, where.keys()):
            return 0

        try:
            return self._filter(model, where).count()
        except SQLAlchemyError as e:
            db.session.rollback()
            self._log_error('count', table, {'where_keys': list(where)}, str(e))
            return 0
