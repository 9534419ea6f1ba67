"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span more than one aggregate
    (e.g. a like touches the post and produces a notification).
    """

    pass
