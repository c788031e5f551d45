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
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Car:
    """
    A car can have a GPS, a trip computer and some number of seats.
    Different models of cars (sports car, SUV, cabriolet) might have
    different features installed or enabled.
    """
    seats: Optional[int] = None
    engine: Optional[str] = None
    trip_computer: bool = False
    gps: bool = False

    def is_empty(self) -> bool:
        return self == Car()

    def to_rows(self) -> List[Tuple[str, object]]:
        return [
            ('seats', self.seats),
            ('engine', self.engine),
            ('trip computer', self.trip_computer),
            ('gps', self.gps)
        ]


@dataclass
class Manual:
    """
    Each car should have a user manual that corresponds to the car's
    configuration and describes all its features.
    """
    sections: List[Tuple[str, str]] = field(default_factory=list)

    def add_section(self, title: str, text: str):
        self.sections.append((title, text))

    def is_empty(self) -> bool:
        return not self.sections

    def to_rows(self) -> List[Tuple[str, str]]:
        return list(self.sections)
