"""Domain-level value objects and events.

This package holds the rules that decide *whether* an input is acceptable,
independent from *where* it is checked (routers, services, repositories).
Every rejection is reported as a ``ClassifiedError``.
"""
