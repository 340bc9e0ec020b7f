# models/scheduled_task.py

from extensions import db
from sqlalchemy import CheckConstraint


class ScheduledTask(db.Model):
    __tablename__ = 'scheduled_tasks'
    id = db.Column(db.Integer, primary_key=True)
    hook = db.Column(db.String(100), unique=True, nullable=False)
    # 'hourly', 'twicedaily', 'daily', 'weekly'
    recurrence = db.Column(db.String(20), nullable=False)
    next_run = db.Column(db.DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("recurrence IN ('hourly', 'twicedaily', 'daily', 'weekly')", name="check_task_recurrence"),
    )
