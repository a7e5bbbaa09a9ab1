"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services sequence repository and provider calls that don't
    belong to a single entity.
    """

    pass
