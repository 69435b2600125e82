"""
Record model used by the service and controllers.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from .enums import Gender, JobTitle

MALE_AVATARS = ("ic_man_1", "ic_man_2", "ic_man_3")
FEMALE_AVATARS = ("ic_woman_1", "ic_woman_2", "ic_woman_3")
DEFAULT_AVATAR = "person"


def random_avatar(gender: Gender) -> str:
    """Pick an avatar key matching the gender; DEFAULT_AVATAR when none is selected."""
    if gender == Gender.MALE:
        return random.choice(MALE_AVATARS)
    if gender == Gender.FEMALE:
        return random.choice(FEMALE_AVATARS)
    return DEFAULT_AVATAR


@dataclass(frozen=True)
class Record:
    """
    A person's profile. id 0 marks a record that has not been stored yet.

    avatar is display-only: it is not persisted and not compared.
    """

    name: str
    age: int
    job_title: JobTitle
    gender: Gender
    id: int = 0
    avatar: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if self.avatar is None:
            object.__setattr__(self, "avatar", random_avatar(self.gender))

    @property
    def is_new(self) -> bool:
        return not self.id
