from .interface import IBuilder
from .abstract import AbstractBuilder
from .concrete import CarBuilder, CarManualBuilder
