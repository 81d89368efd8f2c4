from . import ISubject
from patternbook.commons.log_helper import get_logger
from patternbook.exceptions import InvalidTypeError

import copy

import click

_LOG = get_logger(__name__)

REAL_SUBJECT_REQUEST_MESSAGE = 'RealSubject: Handling request.'
PROXY_ACCESS_CHECK_MESSAGE = ('Proxy: Checking access prior to firing a real '
                              'request.')
PROXY_ACCESS_LOG_MESSAGE = 'Proxy: Logging the time of request.'


class RealSubject(ISubject):
    """
    A concrete Subject class, holding the actual request handling.
    """

    def request(self):
        click.echo(REAL_SUBJECT_REQUEST_MESSAGE)


class Proxy(ISubject):
    """
    A concrete Subject class, which guards a private copy of a real
    subject: checks access prior to forwarding a request and logs
    the access afterwards.
    """

    def __init__(self, real_subject: RealSubject):
        if not isinstance(real_subject, RealSubject):
            raise InvalidTypeError('A proxied subject must be of RealSubject '
                                   'class.')
        self._real_subject = copy.copy(real_subject)

    def request(self):
        if self._check_access():
            self._real_subject.request()
            self._log_access()

    def _check_access(self) -> bool:
        # Actual checks would go here.
        _LOG.debug('Access granted')
        click.echo(PROXY_ACCESS_CHECK_MESSAGE)
        return True

    def _log_access(self):
        click.echo(PROXY_ACCESS_LOG_MESSAGE)
