from .interface import ISubject
from .concrete import (
    RealSubject, Proxy, REAL_SUBJECT_REQUEST_MESSAGE,
    PROXY_ACCESS_CHECK_MESSAGE, PROXY_ACCESS_LOG_MESSAGE
)
