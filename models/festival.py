# models/festival.py

from extensions import db


class Festival(db.Model):
    __tablename__ = 'festivals'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    # Заполняется один раз при создании из name, дальше не меняется
    slug = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=True)
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    location = db.Column(db.String(255), nullable=True)
    # Статус без графа переходов: 'draft', 'published', 'archived'...
    status = db.Column(db.String(20), nullable=False, default='draft', index=True)
    settings = db.Column(db.JSON, nullable=True)

    # Время ставит репозиторий, а не база
    created_at = db.Column(db.DateTime, nullable=True)
    updated_at = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        db.Index('ix_festivals_dates', 'start_date', 'end_date'),
    )

    def to_dict(self):
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

    def __repr__(self):
        return f'<Festival {self.id} {self.slug!r}>'
