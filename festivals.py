# festivals.py
# Репозиторий фестивалей: CRUD, выборка с фильтрами и подсчет поверх таблицы festivals

from flask import g

from database import Database
from interfaces import RowStore
from utils import current_time, slugify

TABLE = 'festivals'

# Параметры выборки по умолчанию для get_all
LIST_DEFAULTS = {
    'status': '',
    'order_by': 'start_date',
    'order': 'DESC',
    'limit': 0,
    'offset': 0,
}


class Festivals:

    def __init__(self, db: RowStore, slugify=slugify, now=current_time):
        self.db = db
        self.slugify = slugify
        self.now = now

    def get_all(self, args=None, **kwargs):
        """
        Список фестивалей. Понимает status (точное совпадение, пустой
        игнорируется), order_by, order, limit (0 = без ограничения) и offset.
        Прочие ключи молча игнорируются.
        """
        params = dict(LIST_DEFAULTS)
        params.update({k: v for k, v in dict(args or {}, **kwargs).items() if k in LIST_DEFAULTS})

        where = {}
        if params['status']:
            where['status'] = params['status']

        return self.db.get_results(
            TABLE,
            where,
            params['order_by'],
            params['order'],
            int(params['limit'] or 0),
            int(params['offset'] or 0),
        )

    def get_by_id(self, festival_id):
        return self.db.get_row(TABLE, {'id': festival_id})

    def get_by_slug(self, slug):
        return self.db.get_row(TABLE, {'slug': slug})

    def create(self, data):
        """Создает фестиваль. slug и created_at ставятся здесь. Возвращает id или None."""
        if not data.get('name'):
            raise ValueError("Для фестиваля обязательно название (name)")

        data = dict(data)
        data['slug'] = self.slugify(data['name'])
        data['created_at'] = self.now()
        data.pop('updated_at', None)

        return self.db.insert(TABLE, data)

    def update(self, festival_id, data):
        """Частичное обновление: меняются только переданные поля. slug не пересчитывается."""
        data = dict(data)
        data.pop('slug', None)
        data.pop('id', None)
        data['updated_at'] = self.now()

        return self.db.update(TABLE, data, {'id': festival_id})

    def delete(self, festival_id):
        return self.db.delete(TABLE, {'id': festival_id})

    def count(self, where=None):
        return self.db.count(TABLE, where or {})


def get_festivals():
    """Репозиторий в рамках текущего контекста приложения."""
    if 'festivals' not in g:
        g.festivals = Festivals(Database())
    return g.festivals
