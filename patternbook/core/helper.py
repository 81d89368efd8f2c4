"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
import logging
from functools import wraps

import click

from patternbook.commons.log_helper import (get_logger, LOG_NAME,
                                            USER_LOG_NAME, CONSOLE_HANDLER)

_LOG = get_logger(__name__)


def set_debug_log_level(ctx, param, value):
    """
    Switches both logger trees to DEBUG and echoes internal logs
    to the console.
    """
    if not value:
        return
    user_logger = logging.getLogger(USER_LOG_NAME)
    internal_logger = logging.getLogger(LOG_NAME)
    console_handler = next(handler for handler in user_logger.handlers
                           if handler.name == CONSOLE_HANDLER)

    user_logger.setLevel(logging.DEBUG)
    internal_logger.setLevel(logging.DEBUG)
    if console_handler not in internal_logger.handlers:
        internal_logger.addHandler(console_handler)
    _LOG.debug('The logs level was set to DEBUG')


def verbose_option(func):
    @click.option('--verbose', '-v', is_flag=True,
                  callback=set_debug_log_level, expose_value=False,
                  is_eager=True, help="Enable logging verbose mode.")
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper
