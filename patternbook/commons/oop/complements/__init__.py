from .builder import produce_custom_product, produce_product
from .proxy import client_code
