"""Base service class for domain services."""


class Service:
    """Base class for all verdict domain services.

    Domain services hold the voting rules that span votes, their voters and
    their votables, and reach storage only through repository interfaces.
    """

    pass
