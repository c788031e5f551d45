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
import click
from tabulate import tabulate

from carbuilder import __version__
from carbuilder.application import Application
from carbuilder.commons.log_helper import get_logger, get_user_logger
from carbuilder.constants import (ALL_PRODUCTS, CAR_PRODUCT, MAKE_ACTION,
                                  MANUAL_PRODUCT, OK_RETURN_CODE,
                                  PROFILE_DESCRIPTIONS, PROFILES_ACTION,
                                  SPORTS_CAR_PROFILE)
from carbuilder.decorators import return_code_manager, verbose_option
from carbuilder.director import Director

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


def tabulate_data(data, headers=(), tablefmt='plain'):
    return tabulate(tabular_data=data, tablefmt=tablefmt,
                    headers=headers, missingval='-')


@click.group(name='carbuilder')
@return_code_manager
@click.version_option(version=__version__)
def carbuilder():
    pass


@carbuilder.command(name=MAKE_ACTION)
@return_code_manager
@click.option('--profile', default=SPORTS_CAR_PROFILE,
              type=click.Choice(list(Director().profiles()),
                                case_sensitive=False),
              help='Configuration profile the director applies. '
                   f'Default value: {SPORTS_CAR_PROFILE}')
@click.option('--product', default=ALL_PRODUCTS,
              type=click.Choice([CAR_PRODUCT, MANUAL_PRODUCT, ALL_PRODUCTS],
                                case_sensitive=False),
              help='Product to print. Default value: all')
@verbose_option
def make(profile, product):
    """Builds a car and its manual using the given profile."""
    profile, product = profile.lower(), product.lower()
    USER_LOG.info(f'Making a car using the \'{profile}\' profile')
    car, manual = Application().make_car(profile=profile)

    if product in (CAR_PRODUCT, ALL_PRODUCTS):
        click.echo('Car:')
        if car.is_empty():
            click.echo('    <empty>')
        else:
            click.echo(tabulate_data(car.to_rows(),
                                     headers=('feature', 'value')))
    if product in (MANUAL_PRODUCT, ALL_PRODUCTS):
        click.echo('Manual:')
        if manual.is_empty():
            click.echo('    <empty>')
        else:
            click.echo(tabulate_data(manual.to_rows(),
                                     headers=('section', 'text')))
    return OK_RETURN_CODE


@carbuilder.command(name=PROFILES_ACTION)
@return_code_manager
@verbose_option
def profiles():
    """Lists the configuration profiles known to the director."""
    rows = [(name, PROFILE_DESCRIPTIONS.get(name))
            for name in Director().profiles()]
    click.echo(tabulate_data(rows, headers=('profile', 'description')))
    return OK_RETURN_CODE
