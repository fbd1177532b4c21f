"""
================================================================================
Form Data Generator
================================================================================

Generates random but valid person data for web forms (names, e-mail, mobile
number, address). Static values such as gender or state come from the JSON
fixtures; everything that should differ between runs comes from here.

Usage:
    generator = FormDataGenerator(seed=42)
    person = generator.person()
    await dsl.send_keys("#firstName", person.first_name)

================================================================================
"""

import random
import string
from dataclasses import dataclass
from typing import Optional


@dataclass
class FormData:
    """One generated person."""
    first_name: str
    last_name: str
    email: str
    mobile: str
    current_address: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class FormDataGenerator:
    """
    Random person data generator.

    Pass ``seed`` to make a run reproducible.
    """

    FIRST_NAMES = ["Anna", "Boris", "Clara", "Daniel", "Elena", "Filip", "Georgi", "Maria"]
    LAST_NAMES = ["Petrov", "Ivanova", "Smith", "Miller", "Dimitrov", "Novak", "Keller"]
    CITIES = ["Sofia", "Plovdiv", "Varna", "Berlin", "Vienna", "Prague"]
    STREETS = ["Main Street", "Park Avenue", "Oak Lane", "River Road"]
    EMAIL_PROVIDER = "fake.email.com"

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def first_name(self) -> str:
        return self._random.choice(self.FIRST_NAMES)

    def last_name(self) -> str:
        return self._random.choice(self.LAST_NAMES)

    def email(self, first_name: str, last_name: str) -> str:
        """Lower-case e-mail built from the name with a random suffix."""
        suffix = "".join(self._random.choices(string.digits, k=3))
        return f"{first_name}.{last_name}{suffix}@{self.EMAIL_PROVIDER}".lower()

    def mobile(self) -> str:
        """Ten-digit mobile number without a leading zero."""
        return str(self._random.randint(1000000000, 9999999999))

    def address(self) -> str:
        house = self._random.randint(1, 250)
        return f"{self._random.choice(self.CITIES)} {house} {self._random.choice(self.STREETS)}"

    def person(self) -> FormData:
        first_name = self.first_name()
        last_name = self.last_name()
        return FormData(
            first_name=first_name,
            last_name=last_name,
            email=self.email(first_name, last_name),
            mobile=self.mobile(),
            current_address=self.address(),
        )
