from abc import ABC, abstractmethod


class IBuilder(ABC):

    @abstractmethod
    def _reset(self):
        ...

    @property
    @abstractmethod
    def product(self):
        ...

    @abstractmethod
    def attach(self, part):
        ...

    @abstractmethod
    def produce_part_a(self):
        ...

    @abstractmethod
    def produce_part_b(self):
        ...

    @abstractmethod
    def produce_part_c(self):
        ...
