"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services orchestrate entities and the infrastructure ports
    (repositories, clock, logger) they are given.
    """

    pass
