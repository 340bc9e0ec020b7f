# models/__init__.py
# Инициализация моделей

from .festival import Festival
from .option import Option
from .scheduled_task import ScheduledTask
