"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker namespaces so that the vocabulary engine never imports its
persistence or presentation collaborators directly.

Usage:
    # Publisher (sender)
    from vocabstack_app.core.signals import knowledge_changed
    knowledge_changed.send(tracker, snapshot={...})

    # Subscriber (receiver) - in module's events.py
    @knowledge_changed.connect
    def on_knowledge_changed(sender, **kwargs):
        ...
"""
from blinker import Namespace

vocab_signals = Namespace()

# Signal: Fired after every knowledge mutation (mark or bulk load)
# Payload: snapshot (dict entry_id -> state), entry_id (None for bulk load), state
knowledge_changed = vocab_signals.signal('knowledge_changed')

# Signal: Fired when content loading succeeds
# Payload: topics_count, entries_count
vocab_loaded = vocab_signals.signal('vocab_loaded')

# Signal: Fired when content loading fails
# Payload: error (str)
vocab_load_failed = vocab_signals.signal('vocab_load_failed')

# Signal: Fired when the list order actually changes after a filter update
# Payload: order (list[int])
list_order_changed = vocab_signals.signal('list_order_changed')
