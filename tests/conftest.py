"""Shared pytest fixtures for the portfolio app.

``app`` is a fresh application built with ``TestingConfig`` whose resume
folder points at an empty temporary directory. Tests that need the resume
document request ``resume_file`` as well.
"""

import pytest

from app import create_app

from tests.helpers import RESUME_BYTES


@pytest.fixture
def app(tmp_path):
    app = create_app('testing')
    app.config['RESUME_FOLDER'] = str(tmp_path)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / 'Kedhar_Vishnu_Developer.pdf'
    path.write_bytes(RESUME_BYTES)
    return path
