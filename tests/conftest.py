import json
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vocabstack_app import create_app, db
from vocabstack_app.config import Config


SAMPLE_VOCAB = {
    'topics': [
        {'id': 'daily-life', 'name': 'Daily Life', 'level': 'A1'},
        {'id': 'travel', 'name': 'Travel', 'level': 'A2'},
        {'id': 'food', 'name': 'Food', 'level': 'Mixed'},
    ],
    'entries': [
        {'id': '1', 'word': 'cat', 'meaningVi': 'con mèo', 'topicId': 'daily-life', 'level': 'A1',
         'examples': [{'en': 'The cat sleeps.', 'vi': 'Con mèo ngủ.'}]},
        {'id': '2', 'word': 'breakfast', 'meaningVi': 'bữa sáng', 'topicId': 'daily-life', 'level': 'A1'},
        {'id': '3', 'word': 'passport', 'meaningVi': 'hộ chiếu', 'topicId': 'travel', 'level': 'A2'},
        {'id': '4', 'word': 'luggage', 'meaningVi': 'hành lý', 'topicId': 'travel', 'level': 'B1',
         'examples': [{'en': 'My luggage is heavy.', 'vi': 'Hành lý của tôi nặng.'}]},
        {'id': '5', 'word': 'catfish', 'meaningVi': 'cá trê', 'topicId': 'food', 'level': 'B1'},
        {'id': '6', 'word': 'spicy', 'meaningVi': 'cay', 'topicId': 'food', 'level': 'A2'},
    ],
}


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    VOCAB_DATA_URL = None
    VOCAB_AUTOLOAD = True
    LOG_DIR = None


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / 'vocab.json'
    path.write_text(json.dumps(SAMPLE_VOCAB, ensure_ascii=False), encoding='utf-8')
    return str(path)


@pytest.fixture
def config_class(vocab_file):
    class _Config(TestConfig):
        VOCAB_DATA_PATH = vocab_file
    return _Config


@pytest.fixture
def app(config_class):
    app = create_app(config_class)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
