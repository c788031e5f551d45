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
from typing import Tuple

from carbuilder.commons.log_helper import get_logger
from carbuilder.constants import SPORTS_CAR_PROFILE
from carbuilder.director import Director
from carbuilder.patterns import CarBuilder, CarManualBuilder
from carbuilder.products import Car, Manual

_LOG = get_logger(__name__)


class Application:
    """
    The client code creates a builder object, passes it to the director
    and then initiates the construction process. The end result is
    retrieved from the concrete builder, since the director isn't aware
    of concrete builders and products.
    """

    def make_car(self, profile: str = SPORTS_CAR_PROFILE
                 ) -> Tuple[Car, Manual]:
        director = Director()

        car_builder = CarBuilder()
        director.construct(profile, car_builder)
        car = car_builder.get_product()
        _LOG.info(f'Car produced: {car}')

        manual_builder = CarManualBuilder()
        director.construct(profile, manual_builder)
        manual = manual_builder.get_product()
        _LOG.info(f'Manual produced: {manual}')

        return car, manual
