import logging

from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator

log = logging.getLogger(__name__)


class CommandHandlerBase:
    """Represents the base class for all services used to handle Order Service commands."""

    mediator: Mediator
    """ Gets the service used to mediate calls """

    mapper: Mapper
    """ Gets the service used to map objects """

    def __init__(self, mediator: Mediator, mapper: Mapper):
        self.mediator = mediator
        self.mapper = mapper
