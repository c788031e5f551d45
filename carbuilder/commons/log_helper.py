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
from datetime import date
from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL
from pathlib import Path
from typing import Optional

from carbuilder.constants import DEBUG_ENV_NAME, LOGS_ENV_NAME

LOG_USER_HOME_FOLDER_NAME = '.carbuilder_logs'
LOG_FILE_NAME = '%Y-%m-%d-carbuilder.log'
LOG_NAME = 'carbuilder'
USER_LOG_NAME = f'user-{LOG_NAME}'
CONSOLE_HANDLER = 'console_handler'
FILE_HANDLER = 'file_handler'
LOG_LEVEL = (DEBUG
             if os.environ.get(DEBUG_ENV_NAME, '').lower() == 'true'
             else INFO)
LOG_FORMAT_FOR_FILE = (
    '%(asctime)s [%(levelname)s] '
    '%(filename)s:%(lineno)d:%(funcName)s LOG: %(message)s'
)
LOG_FORMAT_FOR_CONSOLE = '[%(levelname)s] %(message)s'


class ConsoleLogFormatter(logging.Formatter):
    """Logging Formatter to add colors to console logs"""

    grey = '\x1b[0;37m'
    white = '\x1b[0;38m'
    yellow = '\x1b[0;33m'
    red = '\x1b[0;31m'
    reset = '\x1b[0m'
    format = LOG_FORMAT_FOR_CONSOLE

    FORMATS = {
        DEBUG: grey + format + reset,
        INFO: white + format + reset,
        WARNING: yellow + format + reset,
        ERROR: red + format + reset,
        CRITICAL: red + format + reset
    }

    def format(self, record: logging.LogRecord) -> str:
        log_format = self.FORMATS.get(record.levelno)
        console_formatter = logging.Formatter(log_format)
        return console_formatter.format(record)


def get_log_file_path() -> Optional[str]:
    """Returns the path to the file where logs will be saved.
    :rtype: str
    :returns: a path to the main log file or None, given the logs folder
        cannot be created
    """
    logs_path = os.environ.get(LOGS_ENV_NAME)
    if not logs_path:
        logs_path = os.path.join(Path.home(), LOG_USER_HOME_FOLDER_NAME)

    try:
        os.makedirs(logs_path, exist_ok=True)
    except OSError as e:
        print(f'Error while creating logs path: {e}', file=sys.stderr)
        return

    today = date.today()
    return os.path.join(logs_path, today.strftime(LOG_FILE_NAME))


def build_logging_config(log_file_path: Optional[str],
                         level: int = LOG_LEVEL) -> dict:
    """
    Builds the dictConfig mapping of the carbuilder loggers. The file
    handler is attached only when a log file path is given.
    :type log_file_path: Optional[str]
    :type level: int
    :rtype: dict
    """
    file_handlers = [FILE_HANDLER] if log_file_path else []
    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'file_formatter': {
                'format': LOG_FORMAT_FOR_FILE
            },
            'console_formatter': {
                '()': ConsoleLogFormatter
            }
        },
        'handlers': {
            CONSOLE_HANDLER: {
                'class': 'logging.StreamHandler',
                'formatter': 'console_formatter',
                'stream': 'ext://sys.stdout'
            }
        },
        'loggers': {
            USER_LOG_NAME: {
                'level': level,
                'handlers': [CONSOLE_HANDLER, *file_handlers]
            },
            LOG_NAME: {
                'level': level,
                'handlers': list(file_handlers)
            }
        }
    }
    if log_file_path:
        config['handlers'][FILE_HANDLER] = {
            'class': 'logging.FileHandler',
            'formatter': 'file_formatter',
            'filename': log_file_path
        }

    if level == DEBUG:
        config['loggers'][LOG_NAME]['handlers'].append(CONSOLE_HANDLER)
    return config


log_file_path = get_log_file_path()

logging.config.dictConfig(build_logging_config(log_file_path))

logging.captureWarnings(True)

user_logger = logging.getLogger(USER_LOG_NAME)

carbuilder_logger = logging.getLogger(LOG_NAME)


def get_logger(log_name: str, level=LOG_LEVEL):
    """
    :param level:   CRITICAL = 50
                    ERROR = 40
                    WARNING = 30
                    INFO = 20
                    DEBUG = 10
                    NOTSET = 0
    :type log_name: str
    :type level: int
    """
    module_logger = carbuilder_logger.getChild(log_name)
    if level:
        module_logger.setLevel(level)
    return module_logger


def get_user_logger(level=LOG_LEVEL):
    """
    :param level:   CRITICAL = 50
                    ERROR = 40
                    WARNING = 30
                    INFO = 20
                    DEBUG = 10
                    NOTSET = 0
    :type level: int
    """
    module_logger = user_logger.getChild('child')
    if level:
        module_logger.setLevel(level)
    return module_logger


def set_debug_log_level():
    """
    Switches every carbuilder logger to the DEBUG level, mirroring the
    internal logger to the console.
    """
    loggers = [logging.getLogger(name) for name in
               logging.root.manager.loggerDict if
               name.startswith(LOG_NAME) or
               name.startswith(USER_LOG_NAME)]

    console_handler = logging.getLogger(USER_LOG_NAME).handlers[0]

    for logger in loggers:
        if not logger.isEnabledFor(logging.DEBUG):
            logger.setLevel(logging.DEBUG)
            if logger.name == LOG_NAME:
                logger.addHandler(console_handler)
