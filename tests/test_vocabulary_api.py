import pytest

from vocabstack_app import create_app, db
from vocabstack_app.models import AppStorage
from vocabstack_app.modules.vocabulary.interface import VocabularyInterface


def test_state_after_autoload(client):
    response = client.get('/api/vocabulary/state')
    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['status'] == 'succeeded'
    assert data['entries_count'] == 6
    assert data['flashcard']['order'] == [0, 1, 2, 3, 4, 5]


def test_topics(client):
    data = client.get('/api/vocabulary/topics').get_json()['data']
    assert [t['id'] for t in data] == ['daily-life', 'travel', 'food']


def test_list_applies_query_filters(client):
    response = client.get('/api/vocabulary/list?q=cat')
    body = response.get_json()
    assert body['success'] is True
    assert body['data']['order'] == [0, 4]
    assert [e['word'] for e in body['data']['entries']] == ['cat', 'catfish']
    assert body['data']['entries'][0]['knowledge'] == 'unknown'
    assert body['data']['query'] == {'q': 'cat'}

    # clearing the search keeps the hits in front
    body = client.get('/api/vocabulary/list').get_json()
    assert body['data']['order'] == [0, 4, 1, 2, 3, 5]


def test_list_reports_unchanged_order(client):
    first = client.get('/api/vocabulary/list?lvls=B1').get_json()['data']
    second = client.get('/api/vocabulary/list?lvls=B1').get_json()['data']
    assert first['changed'] is True
    assert second['changed'] is False
    assert second['order'] == [3, 4]


def test_topic_stats(client):
    client.post('/api/vocabulary/knowledge/1', json={'state': 'known'})
    data = client.get('/api/vocabulary/topic-stats?topics=travel').get_json()['data']
    assert data['daily-life'] == {'total': 2, 'known': 1, 'learning': 0, 'unknown': 1}
    assert data['food']['total'] == 2


def test_mark_is_persisted(app, client):
    response = client.post('/api/vocabulary/knowledge/3', json={'state': 'learning'})
    assert response.status_code == 200
    assert client.get('/api/vocabulary/knowledge/3').get_json()['data']['state'] == 'learning'

    stored = AppStorage.get(app.config['KNOWLEDGE_STORAGE_KEY'])
    assert stored['3'] == 'learning'
    assert stored['1'] == 'unknown'


def test_mark_rejects_bad_state(client):
    response = client.post('/api/vocabulary/knowledge/3', json={'state': 'mastered'})
    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_mark_unknown_entry(client):
    response = client.post('/api/vocabulary/knowledge/999', json={'state': 'known'})
    assert response.status_code == 404
    assert response.get_json()['code'] == 'NOT_FOUND'


def test_bulk_load_replaces_knowledge(client):
    client.post('/api/vocabulary/knowledge/2', json={'state': 'known'})
    response = client.put('/api/vocabulary/knowledge', json={'1': 'known'})
    assert response.status_code == 200
    snapshot = response.get_json()['data']
    assert snapshot['1'] == 'known'
    assert snapshot['2'] == 'unknown'


def test_bulk_load_rejects_non_object(client):
    response = client.put('/api/vocabulary/knowledge', json=['known'])
    assert response.status_code == 400


def test_knowledge_survives_new_engine(app):
    VocabularyInterface.get_engine(app).mark('5', 'known')

    # A fresh engine on the same database restores from the stored snapshot
    runtime = VocabularyInterface.install(app)
    assert runtime.engine.read_knowledge('5') == 'unknown'
    assert VocabularyInterface.restore_knowledge(app) is True
    assert runtime.engine.read_knowledge('5') == 'known'

    assert VocabularyInterface.load_content(app) is True
    assert runtime.engine.read_knowledge('5') == 'known'
    assert runtime.engine.read_knowledge('6') == 'unknown'


def test_malformed_snapshot_is_ignored(app):
    AppStorage.set(app.config['KNOWLEDGE_STORAGE_KEY'], ['not', 'a', 'dict'])
    db.session.commit()
    assert VocabularyInterface.restore_knowledge(app) is False


def test_flashcard_flow(client):
    client.get('/api/vocabulary/list?q=cat')
    data = client.post('/api/vocabulary/flashcards/start', json={}).get_json()['data']
    assert data['order'] == [0, 4]
    assert data['current']['word'] == 'cat'

    data = client.post('/api/vocabulary/flashcards/toggle').get_json()['data']
    assert data['showAnswer'] is True

    data = client.post('/api/vocabulary/flashcards/next').get_json()['data']
    assert data['index'] == 1
    assert data['showAnswer'] is False
    assert data['current']['word'] == 'catfish'

    data = client.post('/api/vocabulary/flashcards/next').get_json()['data']
    assert data['index'] == 0

    data = client.post('/api/vocabulary/flashcards/prev').get_json()['data']
    assert data['index'] == 1


def test_flashcard_start_with_explicit_order(client):
    data = client.post('/api/vocabulary/flashcards/start', json={'order': [5, 2, 99], 'index': 1}).get_json()['data']
    assert data['order'] == [5, 2]
    assert data['current']['id'] == '3'


def test_flashcard_start_validates_body(client):
    response = client.post('/api/vocabulary/flashcards/start', json={'order': 'all'})
    assert response.status_code == 400


@pytest.mark.parametrize('mode', ['remaining', 'from_current', 'all'])
def test_flashcard_shuffle_modes(client, mode):
    client.post('/api/vocabulary/flashcards/start', json={})
    data = client.post('/api/vocabulary/flashcards/shuffle', json={'mode': mode}).get_json()['data']
    assert sorted(data['order']) == [0, 1, 2, 3, 4, 5]


def test_flashcard_shuffle_rejects_unknown_mode(client):
    response = client.post('/api/vocabulary/flashcards/shuffle', json={'mode': 'sideways'})
    assert response.status_code == 400


def test_reload_failure_is_reported(app, client, tmp_path):
    app.config['VOCAB_DATA_PATH'] = str(tmp_path / 'gone.json')
    response = client.post('/api/vocabulary/load')
    assert response.status_code == 502
    body = response.get_json()
    assert body['code'] == 'LOAD_FAILED'
    assert body['data']['status'] == 'failed'
    assert body['data']['entries_count'] == 6


def test_list_is_empty_after_failed_reload(app, client, tmp_path):
    assert client.get('/api/vocabulary/list?q=cat').get_json()['data']['order'] == [0, 4]

    broken = tmp_path / 'broken.json'
    broken.write_text('{not json', encoding='utf-8')
    app.config['VOCAB_DATA_PATH'] = str(broken)
    assert client.post('/api/vocabulary/load').status_code == 502

    data = client.get('/api/vocabulary/list').get_json()['data']
    assert data['status'] == 'failed'
    assert data['order'] == []


def test_reload_success(client):
    response = client.post('/api/vocabulary/load')
    assert response.status_code == 200
    assert response.get_json()['data']['status'] == 'succeeded'


def test_startup_with_missing_content(config_class, tmp_path):
    class MissingDataConfig(config_class):
        VOCAB_DATA_PATH = str(tmp_path / 'nothing.json')

    app = create_app(MissingDataConfig)
    with app.app_context():
        client = app.test_client()
        state = client.get('/api/vocabulary/state').get_json()['data']
        assert state['status'] == 'failed'
        assert client.get('/api/vocabulary/list').get_json()['data']['order'] == []
        db.session.remove()
        db.drop_all()


def test_unknown_api_route_uses_json_envelope(client):
    response = client.get('/api/vocabulary/nope')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


@pytest.mark.parametrize('url', [
    '/api/vocabulary/knowledge/1',
    '/api/vocabulary/flashcards/shuffle',
    '/api/vocabulary/flashcards/start',
])
def test_non_object_body_is_rejected(client, url):
    response = client.post(url, data='[1]', content_type='application/json')
    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_wrong_method_uses_json_envelope(client):
    response = client.get('/api/vocabulary/load')
    assert response.status_code == 405
    assert response.get_json() == {
        'success': False,
        'code': 'METHOD_NOT_ALLOWED',
        'message': 'Method not allowed',
    }
