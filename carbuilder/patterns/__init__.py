from .builder import (
    IBuilder, AbstractBuilder, CarBuilder, CarManualBuilder
)
