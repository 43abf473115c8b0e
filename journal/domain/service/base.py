"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services own the rules that span records (threads, cascades,
    subscriptions) and are REQUEST-scoped alongside their repositories.
    """

    pass
