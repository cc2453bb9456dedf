from movie_catalog.db import SessionLocal
from movie_catalog.events import EventBus, InMemoryEventBus

event_bus = InMemoryEventBus()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_event_bus() -> EventBus:
    return event_bus
