# scheduler.py
# Реестр периодических задач. Сами задачи запускает хост, здесь только расписание.

import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import ScheduledTask
from utils import current_time

logger = logging.getLogger(__name__)

RECURRENCES = {
    'hourly': timedelta(hours=1),
    'twicedaily': timedelta(hours=12),
    'daily': timedelta(days=1),
    'weekly': timedelta(weeks=1),
}


class TaskScheduler:

    def __init__(self, now=current_time):
        self.now = now

    def schedule_event(self, hook, recurrence, first_run=None):
        """
        Ставит задачу в расписание. Если задача с таким hook уже есть,
        ничего не меняет и возвращает False.
        """
        if recurrence not in RECURRENCES:
            raise ValueError(f"Неизвестная периодичность: {recurrence}")
        if self.next_scheduled(hook) is not None:
            return False

        task = ScheduledTask(hook=hook, recurrence=recurrence, next_run=first_run or self.now())
        db.session.add(task)
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Не удалось запланировать задачу '%s': %s", hook, e)
            return False
        logger.info("Задача '%s' запланирована (%s), первый запуск %s", hook, recurrence, task.next_run)
        return True

    def next_scheduled(self, hook):
        task = ScheduledTask.query.filter_by(hook=hook).first()
        return task.next_run if task else None

    def clear_scheduled_task(self, hook):
        """Снимает задачу с расписания. Возвращает число удаленных записей (0, если задачи не было)."""
        try:
            removed = ScheduledTask.query.filter_by(hook=hook).delete(synchronize_session=False)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Не удалось снять задачу '%s': %s", hook, e)
            return 0
        if removed:
            logger.info("Задача '%s' снята с расписания", hook)
        return removed
