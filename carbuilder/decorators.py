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
import sys
import traceback
from functools import wraps

import click

from carbuilder.commons.log_helper import (get_logger, get_user_logger,
                                           set_debug_log_level)
from carbuilder.constants import FAILED_RETURN_CODE, OK_RETURN_CODE
from carbuilder.exceptions import CarBuilderBaseError

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


def return_code_manager(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return_code = func(*args, **kwargs)
        except Exception as e:
            if isinstance(e, CarBuilderBaseError):
                message = f"{e.__class__.__name__} occurred: {str(e)}"
            else:
                message = (f'An unexpected error occurred: '
                           f'{e.__class__.__name__} {str(e)}')

            USER_LOG.error(message)
            _LOG.exception(traceback.format_exc())

            sys.exit(FAILED_RETURN_CODE)
        if return_code is not None and return_code != OK_RETURN_CODE:
            sys.exit(return_code)

        return return_code
    return wrapper


def _debug_log_level_callback(ctx, param, value):
    if value:
        set_debug_log_level()
        _LOG.debug('The logs level was set to DEBUG')


def verbose_option(func):
    @click.option('--verbose', '-v', is_flag=True,
                  callback=_debug_log_level_callback, expose_value=False,
                  is_eager=True, help="Enable logging verbose mode.")
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper
