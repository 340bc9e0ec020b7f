from flask import Flask

from lifecycle import (
    SCHEDULED_TASKS,
    Activator,
    Deactivator,
    UrlMapCache,
    build_activator,
    build_deactivator,
)
from options import Options
from scheduler import TaskScheduler
from settings import OPTION_KEY
from tests.fakes import FakeOptions, FakeRoutingCache, FakeScheduler


def test_deactivate_invalidates_routes_then_clears_both_tasks():
    routes = FakeRoutingCache()
    scheduler = FakeScheduler(hooks=['daily_cleanup', 'eventbrite_sync', 'unrelated'])

    Deactivator(routes, scheduler).deactivate()

    assert routes.invalidations == 1
    assert scheduler.cleared == ['daily_cleanup', 'eventbrite_sync']
    assert scheduler.hooks == {'unrelated'}


def test_deactivate_twice_is_not_an_error():
    routes = FakeRoutingCache()
    scheduler = FakeScheduler()
    deactivator = Deactivator(routes, scheduler)

    deactivator.deactivate()
    deactivator.deactivate()

    assert routes.invalidations == 2
    assert scheduler.hooks == set()


def test_activate_installs_defaults_and_schedules_tasks(app):
    app.config['ADMIN_EMAIL'] = 'admin@example.com'

    build_activator().activate()

    stored = Options().get_option(OPTION_KEY)
    assert stored['active_festival_id'] is None
    assert stored['voting_weight_first'] == 3
    assert stored['notification_email'] == 'admin@example.com'
    scheduler = TaskScheduler()
    for hook in SCHEDULED_TASKS:
        assert scheduler.next_scheduled(hook) is not None


def test_activate_keeps_existing_settings(app):
    Options().update_option(OPTION_KEY, {'active_festival_id': 4})

    build_activator().activate()
    build_activator().activate()

    assert Options().get_option(OPTION_KEY) == {'active_festival_id': 4}


def test_activate_then_deactivate_twice(app):
    build_activator().activate()

    build_deactivator().deactivate()
    build_deactivator().deactivate()

    scheduler = TaskScheduler()
    for hook in SCHEDULED_TASKS:
        assert scheduler.next_scheduled(hook) is None


def test_activator_with_fakes(app):
    options = FakeOptions()
    routes = FakeRoutingCache()
    scheduler = FakeScheduler()

    Activator(options, scheduler, routes).activate()
    Activator(options, scheduler, routes).activate()

    assert scheduler.scheduled == {'daily_cleanup': 'daily', 'eventbrite_sync': 'hourly'}
    assert routes.invalidations == 2
    assert options.writes == 1
    assert options.values[OPTION_KEY]['voting_weight_first'] == 3


def test_url_map_cache_rebuilds_rules():
    app = Flask(__name__)

    @app.route('/festivals/<slug>')
    def festival(slug):
        return slug

    old_map = app.url_map
    cache = UrlMapCache(app)
    cache.invalidate()
    cache.invalidate()

    assert app.url_map is not old_map
    assert len(list(app.url_map.iter_rules())) == len(list(old_map.iter_rules()))
    adapter = app.url_map.bind('localhost')
    assert adapter.match('/festivals/summer') == ('festival', {'slug': 'summer'})

    client = app.test_client()
    assert client.get('/festivals/summer').data == b'summer'
    assert client.options('/festivals/summer').status_code == 200
