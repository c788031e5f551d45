from abc import ABC, abstractmethod


class IBuilder(ABC):

    @abstractmethod
    def reset(self):
        ...

    @abstractmethod
    def set_seats(self, count: int):
        ...

    @abstractmethod
    def set_engine(self, engine: str):
        ...

    @abstractmethod
    def set_trip_computer(self, enabled: bool):
        ...

    @abstractmethod
    def set_gps(self, enabled: bool):
        ...
