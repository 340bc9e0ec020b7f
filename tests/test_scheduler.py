from datetime import datetime

import pytest

from models import ScheduledTask
from scheduler import TaskScheduler


@pytest.fixture
def scheduler(app):
    return TaskScheduler(now=lambda: datetime(2025, 6, 1, 3, 0))


def test_schedule_event(scheduler):
    assert scheduler.schedule_event('daily_cleanup', 'daily') is True
    assert scheduler.next_scheduled('daily_cleanup') == datetime(2025, 6, 1, 3, 0)


def test_schedule_event_with_first_run(scheduler):
    scheduler.schedule_event('eventbrite_sync', 'hourly', first_run=datetime(2025, 6, 2))
    assert scheduler.next_scheduled('eventbrite_sync') == datetime(2025, 6, 2)


def test_schedule_event_twice_keeps_single_entry(scheduler):
    scheduler.schedule_event('daily_cleanup', 'daily')

    assert scheduler.schedule_event('daily_cleanup', 'weekly') is False
    assert ScheduledTask.query.filter_by(hook='daily_cleanup').one().recurrence == 'daily'


def test_unknown_recurrence(scheduler):
    with pytest.raises(ValueError):
        scheduler.schedule_event('daily_cleanup', 'fortnightly')


def test_clear_scheduled_task(scheduler):
    scheduler.schedule_event('daily_cleanup', 'daily')

    assert scheduler.clear_scheduled_task('daily_cleanup') == 1
    assert scheduler.next_scheduled('daily_cleanup') is None
    assert scheduler.clear_scheduled_task('daily_cleanup') == 0
