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
import logging.config
import os
import sys
import tempfile
from pathlib import Path
from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL
from datetime import date

DEBUG_ENV = 'PATTERNBOOK_DEBUG'
LOGS_ENV = 'PATTERNBOOK_LOGS'
LOG_USER_HOME_FOLDER_NAME = '.patternbook_logs'
LOG_FILE_NAME = '%Y-%m-%d-patternbook.log'
LOG_NAME = 'patternbook'
USER_LOG_NAME = f'user-{LOG_NAME}'
CONSOLE_HANDLER = 'console_handler'
FILE_HANDLER = 'file_handler'
LOG_FORMAT_FOR_FILE = ('%(asctime)s [%(levelname)s] '
                       '%(filename)s:%(lineno)d:%(funcName)s LOG: %(message)s')
LOG_FORMAT_FOR_CONSOLE = '[%(levelname)s] %(message)s'


class ConsoleLogFormatter(logging.Formatter):
    """Colors console records by level"""

    reset = '\x1b[0m'
    COLORS = {
        DEBUG: '\x1b[0;37m',
        INFO: '\x1b[0;38m',
        WARNING: '\x1b[0;33m',
        ERROR: '\x1b[0;31m',
        CRITICAL: '\x1b[0;31m'
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, '')
        formatter = logging.Formatter(color + LOG_FORMAT_FOR_CONSOLE +
                                      self.reset)
        return formatter.format(record)


def resolve_log_level() -> int:
    return DEBUG if os.environ.get(DEBUG_ENV, '').lower() == 'true' else INFO


def get_project_log_file_path() -> str:
    """Returns the path to the file where logs will be saved.
    The logs folder is created under `PATTERNBOOK_LOGS` or the home
    directory, the temporary directory is used when it cannot be created.
    :rtype: str
    """
    logs_folder_path = os.environ.get(LOGS_ENV) or Path.home()
    logs_path = os.path.join(logs_folder_path, LOG_USER_HOME_FOLDER_NAME)

    try:
        os.makedirs(logs_path, exist_ok=True)
    except OSError as e:
        print(f'Error while creating logs path: {e}', file=sys.stderr)
        logs_path = tempfile.gettempdir()

    return os.path.join(logs_path, date.today().strftime(LOG_FILE_NAME))


def build_logging_config(log_file_path: str, level: int) -> dict:
    """
    The user logger always writes to the console, the internal one
    only does so in debug mode.
    """
    internal_handlers = [FILE_HANDLER]
    if level == DEBUG:
        internal_handlers.append(CONSOLE_HANDLER)
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'file_formatter': {'format': LOG_FORMAT_FOR_FILE},
            'console_formatter': {'()': ConsoleLogFormatter}
        },
        'handlers': {
            FILE_HANDLER: {
                'class': 'logging.FileHandler',
                'formatter': 'file_formatter',
                'filename': log_file_path,
                'delay': True
            },
            CONSOLE_HANDLER: {
                'class': 'logging.StreamHandler',
                'formatter': 'console_formatter',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            USER_LOG_NAME: {
                'level': level,
                'handlers': [CONSOLE_HANDLER, FILE_HANDLER]
            },
            LOG_NAME: {
                'level': level,
                'handlers': internal_handlers
            }
        }
    }


logging.config.dictConfig(
    build_logging_config(get_project_log_file_path(), resolve_log_level())
)

user_logger = logging.getLogger(USER_LOG_NAME)

patternbook_logger = logging.getLogger(LOG_NAME)


def get_logger(log_name: str) -> logging.Logger:
    # children inherit the level, so --verbose switches them all at once
    return patternbook_logger.getChild(log_name)


def get_user_logger() -> logging.Logger:
    return user_logger
