from . import IBuilder
from patternbook.exceptions import InvalidTypeError

from functools import singledispatchmethod


class AbstractBuilder(IBuilder):
    def __init__(self):
        self._reset()

    @singledispatchmethod
    def attach(self, part):
        raise InvalidTypeError(f'A part must be a string, got '
                               f'`{type(part).__name__}` instead.')

    @attach.register
    def _attach(self, part: str):
        """
        Appends a single part to the product under construction.
        :part:str
        :returns:None
        """
        self._product.append(part)

    @property
    def product(self):
        """
        Hands over the product under construction and starts a new one,
        so that subsequent steps never touch the returned instance.
        :returns:Product
        """
        product = self._product
        self._reset()
        return product
