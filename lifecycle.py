# lifecycle.py
# Активация и деактивация плагина: таблицы, настройки по умолчанию, расписание задач

import logging

from flask import current_app

from extensions import db
from interfaces import OptionStore, RoutingCache, Scheduler
from options import Options
from scheduler import TaskScheduler
from settings import DEFAULT_SETTINGS, OPTION_KEY

logger = logging.getLogger(__name__)

# Периодические задачи плагина и их периодичность
SCHEDULED_TASKS = {
    'daily_cleanup': 'daily',
    'eventbrite_sync': 'hourly',
}


class UrlMapCache:
    """Кэш маршрутов приложения: скомпилированные правила Werkzeug url_map."""

    def __init__(self, app=None):
        self.app = app

    def invalidate(self):
        """Пересобирает карту маршрутов из текущих правил в новый Map."""
        app = self.app or current_app
        old = app.url_map
        rules = []
        for rule in old.iter_rules():
            fresh = rule.empty()
            # Flask ставит этот флаг после создания правила, empty() его не копирует
            if hasattr(rule, 'provide_automatic_options'):
                fresh.provide_automatic_options = rule.provide_automatic_options
            rules.append(fresh)

        app.url_map = app.url_map_class(
            rules,
            default_subdomain=old.default_subdomain,
            strict_slashes=old.strict_slashes,
            merge_slashes=old.merge_slashes,
            redirect_defaults=old.redirect_defaults,
            converters=old.converters,
            sort_parameters=old.sort_parameters,
            sort_key=old.sort_key,
            host_matching=old.host_matching,
        )


class Deactivator:

    def __init__(self, routing_cache: RoutingCache, scheduler: Scheduler):
        self.routing_cache = routing_cache
        self.scheduler = scheduler

    def deactivate(self):
        """Вызывается хостом при отключении плагина. Повторный вызов безопасен."""
        self.routing_cache.invalidate()

        for hook in SCHEDULED_TASKS:
            self.scheduler.clear_scheduled_task(hook)

        logger.info('Плагин деактивирован, задачи сняты с расписания: %s', ', '.join(SCHEDULED_TASKS))


class Activator:

    def __init__(self, options: OptionStore, scheduler: Scheduler, routing_cache: RoutingCache,
                 option_key=OPTION_KEY):
        self.options = options
        self.scheduler = scheduler
        self.routing_cache = routing_cache
        self.option_key = option_key

    def activate(self):
        db.create_all()

        defaults = dict(DEFAULT_SETTINGS)
        defaults['notification_email'] = current_app.config.get('ADMIN_EMAIL', '')
        # Существующие настройки не перезаписываются
        self.options.add_option(self.option_key, defaults)

        for hook, recurrence in SCHEDULED_TASKS.items():
            self.scheduler.schedule_event(hook, recurrence)

        self.routing_cache.invalidate()
        logger.info('Плагин активирован')


def build_activator():
    return Activator(
        Options(),
        TaskScheduler(),
        UrlMapCache(),
        option_key=current_app.config.get('SETTINGS_OPTION_KEY', OPTION_KEY),
    )


def build_deactivator():
    return Deactivator(UrlMapCache(), TaskScheduler())
