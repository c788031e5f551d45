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
from typing import Callable, Dict

from carbuilder.commons.log_helper import get_logger
from carbuilder.constants import SPORTS_CAR_PROFILE, SUV_PROFILE
from carbuilder.exceptions import InvalidValueError
from carbuilder.patterns import IBuilder

_LOG = get_logger(__name__)


class Director:
    """
    Executes the building steps in a particular sequence. The director
    works with any builder instance the client passes to it, so the
    client may alter the final type of the assembled product.
    """

    def profiles(self) -> Dict[str, Callable[[IBuilder], None]]:
        return {
            SPORTS_CAR_PROFILE: self.construct_sports_car,
            SUV_PROFILE: self.construct_suv
        }

    def construct(self, profile: str, builder: IBuilder):
        """
        Drives the builder through the steps of the named profile.
        :type profile: str
        :type builder: IBuilder
        :raises: InvalidValueError, given the profile is unknown
        """
        construct = self.profiles().get(profile)
        if not construct:
            raise InvalidValueError(
                f'Unknown profile \'{profile}\'. Available profiles: '
                f'{", ".join(self.profiles())}')
        construct(builder)

    def construct_sports_car(self, builder: IBuilder):
        _LOG.debug(f'Constructing a sports car with '
                   f'{builder.__class__.__name__}')
        builder.reset()
        builder.set_seats(2)
        builder.set_engine('SportEngine')
        builder.set_trip_computer(True)
        builder.set_gps(True)

    def construct_suv(self, builder: IBuilder):
        # extension point, the SUV configuration is not defined yet
        pass
