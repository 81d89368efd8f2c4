from . import IBuilder
from patternbook.commons.log_helper import get_logger
from patternbook.exceptions import (
    InvalidTypeError, BuilderNotAssignedError
)

from typing import Union, Type

_LOG = get_logger(__name__)


class Director:
    """
    Sequences the steps of any assigned builder into named recipes.
    The builder is referenced, not owned: products are retrieved
    from the builder itself.
    """

    def __init__(self, builder: Union[IBuilder, Type[None]] = None):
        self.builder = builder

    @property
    def builder(self) -> Union[IBuilder, Type[None]]:
        """
        Returns an assigned builder:IBuilder instance or None.
        :returns:Union[None, IBuilder]
        """
        return self._builder

    @builder.setter
    def builder(self, other: Union[IBuilder, Type[None]]):
        """
        Sets up a builder to direct, None detaches the current one.
        :other:Union[None, IBuilder]
        :returns:None
        """
        if other is not None and not isinstance(other, IBuilder):
            raise InvalidTypeError('A builder must be of IBuilder class.')
        self._builder = other

    def build_minimal_viable_product(self):
        _LOG.debug('Building a minimal viable product')
        self._require_builder().produce_part_a()

    def build_full_featured_product(self):
        _LOG.debug('Building a full featured product')
        builder = self._require_builder()
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()

    def _require_builder(self) -> IBuilder:
        if self._builder is None:
            raise BuilderNotAssignedError('A builder must be assigned before '
                                          'a product can be built.')
        return self._builder
