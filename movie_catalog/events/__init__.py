from movie_catalog.events.bus import EventBus, InMemoryEventBus
from movie_catalog.events.movie_created import DomainEvent, MovieCreated

__all__ = ["DomainEvent", "EventBus", "InMemoryEventBus", "MovieCreated"]
