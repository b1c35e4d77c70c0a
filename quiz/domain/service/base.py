"""Domain service base."""


class Service:
    """Marker base for quiz domain services.

    Services own the rules around a user's account, scores and favourites.
    They receive repositories and settings through their constructor and are
    built per request by the DI container.
    """
