# models/option.py

from extensions import db


class Option(db.Model):
    """Именованное значение в хранилище опций. Тип значения определяет вызывающий."""
    __tablename__ = 'options'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(191), unique=True, nullable=False)  # e.g. "peanut_festival_settings"
    value = db.Column(db.PickleType, nullable=True)
