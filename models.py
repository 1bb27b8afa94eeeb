"""
Models Module - Portfolio content records

The portfolio is static: records are frozen and built once at import time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    name: str
    headline: str
    email: str
    phone: str
    resume_filename: str

    @property
    def mailto(self) -> str:
        return f'mailto:{self.email}'


@dataclass(frozen=True)
class Project:
    title: str
    company: str
    domain: str
    description: str
    tech: str  # comma separated, displayed verbatim


@dataclass(frozen=True)
class Skill:
    name: str
    level: str  # Expert, Advanced or Intermediate
