"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the update protocols that span more than one
    document or more than one collection.
    """

    pass
