"""Tests for the static portfolio content."""

import dataclasses

import pytest

from utils.data import get_profile, get_projects, get_skills


def test_projects_in_order() -> None:
    projects = get_projects()
    assert [p.title for p in projects] == ['Bank of America', 'ASML']
    assert {p.company for p in projects} == {'Tata Consultancy Services'}
    assert [p.domain for p in projects] == ['Banking', 'Semiconductor']


def test_skills_match_list() -> None:
    assert [(s.name, s.level) for s in get_skills()] == [
        ('Java', 'Expert'),
        ('Spring Boot & Microservices', 'Expert'),
        ('React.js', 'Intermediate'),
        ('AWS & Cloud', 'Intermediate'),
        ('SQL / Databases', 'Advanced'),
        ('ETL / Azure Data Factory', 'Intermediate'),
        ('Git / Maven / CI-CD', 'Advanced'),
    ]


def test_profile() -> None:
    profile = get_profile()
    assert profile.email == 'kedharvishnu0@gmail.com'
    assert profile.mailto == 'mailto:kedharvishnu0@gmail.com'
    assert profile.resume_filename == 'Kedhar_Vishnu_Developer.pdf'


def test_records_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_projects()[0].title = 'Changed'
    assert isinstance(get_skills(), tuple)
