# seed_data.py
# Заполнение базы демонстрационными фестивалями

from datetime import date

from festivals import get_festivals
from settings import get_settings

DEMO_FESTIVALS = [
    {'name': 'Peanut Festival 2024', 'start_date': date(2024, 6, 14), 'end_date': date(2024, 6, 16),
     'location': 'Montclair, NJ', 'status': 'archived'},
    {'name': 'Peanut Festival 2025', 'start_date': date(2025, 6, 13), 'end_date': date(2025, 6, 15),
     'location': 'Montclair, NJ', 'status': 'published'},
    {'name': 'Peanut Winter Showcase', 'start_date': date(2025, 12, 5), 'end_date': date(2025, 12, 6),
     'location': 'Brooklyn, NY', 'status': 'draft'},
]


def seed():
    """Удаляет все фестивали и создает демонстрационные. Возвращает id созданных."""
    festivals = get_festivals()

    # --- 1. ОЧИСТКА ДАННЫХ ---
    for festival in festivals.get_all():
        festivals.delete(festival['id'])

    # --- 2. СОЗДАНИЕ ДАННЫХ ---
    created = []
    for data in DEMO_FESTIVALS:
        festival_id = festivals.create(data)
        if festival_id is None:
            raise RuntimeError(f"Не удалось создать фестиваль '{data['name']}'")
        created.append(festival_id)

    # Активным делаем опубликованный фестиваль
    published = festivals.get_all(status='published', limit=1)
    get_settings().set_active_festival_id(published[0]['id'] if published else None)
    return created


if __name__ == '__main__':
    from app import create_app
    from extensions import db

    app = create_app()
    with app.app_context():
        db.create_all()
        ids = seed()
        print(f"Тестовые данные успешно добавлены! Фестивали: {ids}")
