from .interface import IBuilder
from .abstract import AbstractBuilder
from .concrete import ConcreteBuilder, Product, PART_A, PART_B, PART_C
from .director import Director
