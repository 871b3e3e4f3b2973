# File: vocabstack_app/modules/vocabulary/routes/api.py
# JSON API consumed by the vocabulary page (list, knowledge, flashcards).

from flask import current_app, jsonify, request

from vocabstack_app.core.error_handlers import (
    ContentLoadError,
    NotFoundError,
    ValidationError,
    success_response,
)

from .. import blueprint
from ..interface import VocabularyInterface
from ..schemas import KNOWLEDGE_STATES
from ..services import filter_params_from_query, filter_params_to_query

SHUFFLE_MODES = ('remaining', 'from_current', 'all')


def _runtime():
    return VocabularyInterface.get_runtime()


def _entry_payload(engine, entry):
    data = entry.to_dict()
    data['knowledge'] = engine.read_knowledge(entry.id)
    return data


def _flashcard_payload(engine):
    card = engine.current_card()
    data = engine.flashcard.to_dict()
    data['total'] = len(engine.flashcard.order)
    data['current'] = _entry_payload(engine, card) if card else None
    return data


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


# ------------------------------------------------------------------ #
#  Content                                                             #
# ------------------------------------------------------------------ #

@blueprint.route('/state', methods=['GET'])
def api_state():
    """API: trạng thái tải dữ liệu và thẻ hiện tại."""
    runtime = _runtime()
    with runtime.lock:
        return jsonify(success_response(runtime.engine.to_dict()))


@blueprint.route('/load', methods=['POST'])
def api_load():
    """API: tải (lại) dữ liệu từ vựng từ nguồn đã cấu hình."""
    ok = VocabularyInterface.load_content(current_app._get_current_object())
    runtime = _runtime()
    with runtime.lock:
        state = runtime.engine.to_dict()
    if not ok:
        error = ContentLoadError(state['error'])
        body = error.to_dict()
        body['data'] = state
        return jsonify(body), error.status_code
    return jsonify(success_response(state, message='Vocabulary loaded'))


@blueprint.route('/topics', methods=['GET'])
def api_topics():
    runtime = _runtime()
    with runtime.lock:
        topics = [topic.to_dict() for topic in runtime.engine.topics]
    return jsonify(success_response(topics))


@blueprint.route('/list', methods=['GET'])
def api_list():
    """API: áp dụng bộ lọc từ query string và trả về danh sách theo thứ tự hiển thị."""
    params = filter_params_from_query(request.args)
    runtime = _runtime()
    with runtime.lock:
        engine = runtime.engine
        changed = engine.apply_filters(params)
        entries = [_entry_payload(engine, entry) for entry in engine.entries_for(engine.list_order)]
        data = {
            'status': engine.status,
            'order': list(engine.list_order),
            'count': len(entries),
            'changed': changed,
            'entries': entries,
            'query': filter_params_to_query(params),
        }
    return jsonify(success_response(data))


@blueprint.route('/topic-stats', methods=['GET'])
def api_topic_stats():
    params = filter_params_from_query(request.args)
    runtime = _runtime()
    with runtime.lock:
        stats = runtime.engine.topic_stats(params)
    return jsonify(success_response({topic_id: s.to_dict() for topic_id, s in stats.items()}))


# ------------------------------------------------------------------ #
#  Knowledge                                                           #
# ------------------------------------------------------------------ #

@blueprint.route('/knowledge', methods=['GET'])
def api_knowledge_snapshot():
    runtime = _runtime()
    with runtime.lock:
        return jsonify(success_response(runtime.engine.knowledge.snapshot()))


@blueprint.route('/knowledge', methods=['PUT'])
def api_knowledge_load():
    """API: thay thế toàn bộ trạng thái ghi nhớ."""
    snapshot = request.get_json(silent=True)
    if not isinstance(snapshot, dict):
        raise ValidationError('Knowledge snapshot must be a JSON object')
    invalid = {str(k): v for k, v in snapshot.items() if v not in KNOWLEDGE_STATES}
    if invalid:
        raise ValidationError('Unknown knowledge states', errors=invalid)

    runtime = _runtime()
    with runtime.lock:
        runtime.engine.load_knowledge({str(k): v for k, v in snapshot.items()})
        return jsonify(success_response(runtime.engine.knowledge.snapshot()))


@blueprint.route('/knowledge/<string:entry_id>', methods=['GET'])
def api_knowledge_read(entry_id):
    runtime = _runtime()
    with runtime.lock:
        state = runtime.engine.read_knowledge(entry_id)
    return jsonify(success_response({'id': entry_id, 'state': state}))


@blueprint.route('/knowledge/<string:entry_id>', methods=['POST'])
def api_knowledge_mark(entry_id):
    """API: đánh dấu một từ là unknown / learning / known."""
    state = _json_body().get('state')
    if state not in KNOWLEDGE_STATES:
        raise ValidationError(
            'State must be one of: %s' % ', '.join(KNOWLEDGE_STATES),
            errors={'state': state},
        )

    runtime = _runtime()
    with runtime.lock:
        engine = runtime.engine
        if engine.is_ready and engine.get_entry(entry_id) is None:
            raise NotFoundError(f'Entry {entry_id} not found', resource='entry')
        engine.mark(entry_id, state)
    return jsonify(success_response({'id': entry_id, 'state': state}))


# ------------------------------------------------------------------ #
#  Flashcards                                                          #
# ------------------------------------------------------------------ #

@blueprint.route('/flashcards', methods=['GET'])
def api_flashcards():
    runtime = _runtime()
    with runtime.lock:
        return jsonify(success_response(_flashcard_payload(runtime.engine)))


@blueprint.route('/flashcards/start', methods=['POST'])
def api_flashcards_start():
    """API: bắt đầu học thẻ từ danh sách hiện tại (hoặc thứ tự được gửi lên)."""
    body = _json_body()
    order = body.get('order')
    index = body.get('index')
    if order is not None and (
        not isinstance(order, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in order)
    ):
        raise ValidationError('order must be a list of integers')
    if index is not None and (not isinstance(index, int) or isinstance(index, bool)):
        raise ValidationError('index must be an integer')

    runtime = _runtime()
    with runtime.lock:
        runtime.engine.start_flashcards(order=order, index=index, shuffle=bool(body.get('shuffle')))
        return jsonify(success_response(_flashcard_payload(runtime.engine)))


@blueprint.route('/flashcards/next', methods=['POST'])
def api_flashcards_next():
    runtime = _runtime()
    with runtime.lock:
        runtime.engine.flashcard.next()
        return jsonify(success_response(_flashcard_payload(runtime.engine)))


@blueprint.route('/flashcards/prev', methods=['POST'])
def api_flashcards_prev():
    runtime = _runtime()
    with runtime.lock:
        runtime.engine.flashcard.prev()
        return jsonify(success_response(_flashcard_payload(runtime.engine)))


@blueprint.route('/flashcards/toggle', methods=['POST'])
def api_flashcards_toggle():
    runtime = _runtime()
    with runtime.lock:
        runtime.engine.flashcard.toggle_answer()
        return jsonify(success_response(_flashcard_payload(runtime.engine)))


@blueprint.route('/flashcards/shuffle', methods=['POST'])
def api_flashcards_shuffle():
    mode = _json_body().get('mode', 'all')
    if mode not in SHUFFLE_MODES:
        raise ValidationError('mode must be one of: %s' % ', '.join(SHUFFLE_MODES))

    runtime = _runtime()
    with runtime.lock:
        sequencer = runtime.engine.flashcard
        if mode == 'remaining':
            sequencer.shuffle_remaining()
        elif mode == 'from_current':
            sequencer.shuffle_from_current()
        else:
            sequencer.shuffle_all()
        return jsonify(success_response(_flashcard_payload(runtime.engine)))
