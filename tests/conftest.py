import os
import sys

import pytest

# Modules live at the repository root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import Category, Dialect, Tense, Voice


@pytest.fixture
def present_active():
    return Category(Tense.PRESENT, Dialect.MAHARASHTRI, Voice.ACTIVE)


@pytest.fixture
def client():
    from prakrit_verb import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
