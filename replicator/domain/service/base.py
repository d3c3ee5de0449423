"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services coordinate repositories and own the rules that span users,
    memes and interactions. They hold no state beyond their collaborators.
    """
