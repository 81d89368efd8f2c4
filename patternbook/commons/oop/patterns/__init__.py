from .builder import (
    IBuilder, AbstractBuilder, ConcreteBuilder, Product, Director
)
from .proxy import ISubject, RealSubject, Proxy
