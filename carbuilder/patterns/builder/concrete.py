from . import AbstractBuilder

from carbuilder.commons.log_helper import get_logger
from carbuilder.products import Car, Manual

_LOG = get_logger(__name__)


class CarBuilder(AbstractBuilder):
    """
    A concrete Builder class, which installs the features of a car,
    working with the same `Car` instance throughout all the steps.

    Attributes:
        - car:Car: the car being assembled.

    Public methods:
        - reset(self): Starts over with an empty car.
        - set_seats(self, count:int): Sets the number of seats.
        - set_engine(self, engine:str): Installs the given engine.
        - set_trip_computer(self, enabled:bool): Installs a trip computer.
        - set_gps(self, enabled:bool): Installs a global positioning system.
        - get_product(self): Hands the car over and resets the builder.
    """
    def reset(self):
        """
        Resets a builder to an empty car.
        """
        self._car = Car()

    def set_seats(self, count: int):
        _LOG.debug(f'Setting {count} seats')
        self._car.seats = count

    def set_engine(self, engine: str):
        _LOG.debug(f'Installing engine: {engine}')
        self._car.engine = engine

    def set_trip_computer(self, enabled: bool):
        _LOG.debug(f'Trip computer installed: {enabled}')
        self._car.trip_computer = enabled

    def set_gps(self, enabled: bool):
        _LOG.debug(f'GPS installed: {enabled}')
        self._car.gps = enabled

    def get_product(self) -> Car:
        """
        Produces the assembled car. The builder is reset afterwards, thus
        is ready to start producing another car right away.
        :returns:Car
        """
        product = self._car
        self.reset()
        return product


class CarManualBuilder(AbstractBuilder):
    """
    A concrete Builder class, which documents the features of a car in
    a user manual. Unlike the car builder, it keeps the produced manual
    until an explicit `reset` call.

    Attributes:
        - manual:Manual: the manual being written.
    """
    def reset(self):
        """
        Resets a builder to an empty manual.
        """
        self._manual = Manual()

    def set_seats(self, count: int):
        _LOG.debug(f'Documenting {count} seats')
        self._manual.add_section(
            'Seats', f'The car has {count} seats. Adjust each seat with '
                     f'the lever under its front edge.'
        )

    def set_engine(self, engine: str):
        _LOG.debug(f'Documenting engine: {engine}')
        self._manual.add_section(
            'Engine', f'The car is equipped with the {engine}. '
                      f'Follow the service intervals of the engine.'
        )

    def set_trip_computer(self, enabled: bool):
        _LOG.debug(f'Documenting trip computer: {enabled}')
        if enabled:
            text = 'Use the trip computer to track distance and ' \
                   'fuel consumption of the current trip.'
        else:
            text = 'The car has no trip computer.'
        self._manual.add_section('Trip computer', text)

    def set_gps(self, enabled: bool):
        _LOG.debug(f'Documenting GPS: {enabled}')
        if enabled:
            text = 'Enter a destination in the navigation menu to ' \
                   'start the GPS guidance.'
        else:
            text = 'The car has no GPS.'
        self._manual.add_section('GPS', text)

    def get_product(self) -> Manual:
        """
        Returns the manual, without resetting the builder.
        :returns:Manual
        """
        return self._manual
