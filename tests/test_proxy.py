import unittest
from unittest import mock

import click

from patternbook.commons.oop.patterns import ISubject, RealSubject, Proxy
from patternbook.commons.oop.complements import client_code
from patternbook.exceptions import InvalidTypeError

CHECK = 'Proxy: Checking access prior to firing a real request.'
FORWARD = 'RealSubject: Handling request.'
LOG = 'Proxy: Logging the time of request.'


class SubjectTest(unittest.TestCase):

    def setUp(self) -> None:
        self.real_subject = RealSubject()
        patcher = mock.patch.object(click, 'echo')
        self.echo = patcher.start()
        self.addCleanup(patcher.stop)

    def _echoed(self):
        return [call.args[0] for call in self.echo.call_args_list]

    def test_real_subject_request(self):
        client_code(self.real_subject)
        self.assertEqual(self._echoed(), [FORWARD])

    def test_proxy_request(self):
        """
        Tests that a proxy produces the real subject output, framed by
        the access check before and the access log after.
        """
        proxy = Proxy(self.real_subject)
        self.assertIsInstance(proxy, ISubject)
        client_code(proxy)
        self.assertEqual(self._echoed(), [CHECK, FORWARD, LOG])

    def test_proxy_owns_a_copy(self):
        proxy = Proxy(self.real_subject)
        self.assertIsNot(proxy._real_subject, self.real_subject)
        self.assertIsInstance(proxy._real_subject, RealSubject)

    def test_denied_access_is_not_forwarded(self):
        proxy = Proxy(self.real_subject)
        with mock.patch.object(Proxy, '_check_access', return_value=False):
            proxy.request()
        self.assertEqual(self._echoed(), [])

    def test_invalid_real_subject(self):
        self.assertRaises(InvalidTypeError, Proxy, object())


if __name__ == '__main__':
    unittest.main()
