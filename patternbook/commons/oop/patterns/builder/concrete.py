from . import AbstractBuilder
from patternbook.commons.log_helper import get_logger

from typing import Iterator, List

_LOG = get_logger(__name__)

PART_A = 'PartA1'
PART_B = 'PartB1'
PART_C = 'PartC1'


class Product:
    """
    An ordered, append-only sequence of labelled parts.
    Duplicates are allowed and insertion order is preserved.
    """

    def __init__(self):
        self._parts: List[str] = []

    @property
    def parts(self) -> List[str]:
        """
        Returns a copy of the assembled parts.
        :returns:List[str]
        """
        return list(self._parts)

    def append(self, part: str):
        self._parts.append(part)

    def list_parts(self) -> str:
        return 'Product parts: ' + ', '.join(self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)

    def __len__(self):
        return len(self._parts)

    def __repr__(self):
        return f'{self.__class__.__name__}({self._parts!r})'


class ConcreteBuilder(AbstractBuilder):
    """
    A concrete Builder class, which assembles a Product out of
    the `PartA1`, `PartB1` and `PartC1` parts.

    Public methods:
        - produce_part_a(self): Appends `PartA1`.
        - produce_part_b(self): Appends `PartB1`.
        - produce_part_c(self): Appends `PartC1`.
        - attach(self, part:str): Appends an arbitrary part.
    Properties:
        - product:Product: the assembled product, retrieving which
        resets the builder to a new empty product.
    """

    def _reset(self):
        """
        Resets a builder to an empty product.
        """
        self._product = Product()

    def produce_part_a(self):
        _LOG.debug(f'Producing {PART_A}')
        self.attach(PART_A)

    def produce_part_b(self):
        _LOG.debug(f'Producing {PART_B}')
        self.attach(PART_B)

    def produce_part_c(self):
        _LOG.debug(f'Producing {PART_C}')
        self.attach(PART_C)
