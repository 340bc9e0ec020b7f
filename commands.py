# commands.py
# Команды Flask CLI: flask plugin activate | deactivate | seed

import click
from flask.cli import AppGroup

from lifecycle import build_activator, build_deactivator

plugin_cli = AppGroup('plugin', help='Жизненный цикл плагина Peanut Festival.')


@plugin_cli.command('activate')
def activate_command():
    """Создает таблицы, настройки по умолчанию и расписание задач."""
    build_activator().activate()
    click.echo('Plugin activated.')


@plugin_cli.command('deactivate')
def deactivate_command():
    """Снимает задачи с расписания и сбрасывает кэш маршрутов."""
    build_deactivator().deactivate()
    click.echo('Plugin deactivated.')


@plugin_cli.command('seed')
def seed_command():
    """Заполняет базу демонстрационными фестивалями."""
    from seed_data import seed

    ids = seed()
    click.echo(f'Seeded {len(ids)} festivals.')
