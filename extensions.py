# extensions.py
# Файл для хранения экземпляров расширений Flask и сигналов плагина

from blinker import Namespace
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()

# Сигналы для внешних интеграций (аналог do_action в хост-платформе)
plugin_signals = Namespace()
db_error = plugin_signals.signal('db-error')
