import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vocabstack_app.config import BASE_DIR
from vocabstack_app.modules.vocabulary.services.seed_data import build_vocab, read_word_list, write_vocab


def generate():
    words_path = os.path.join(BASE_DIR, 'scripts', 'data', 'english-words-3000.txt')
    out_path = sys.argv[1] if len(sys.argv) > 1 else os.path.join(BASE_DIR, 'data', 'vocab.json')

    words = read_word_list(words_path)
    if words:
        print(f"Using {len(words)} words from {words_path}")
    else:
        print("No word list found, generating synthetic entries.")

    document = build_vocab(words)
    write_vocab(out_path, document)
    print(f"Wrote {len(document['entries'])} entries and {len(document['topics'])} topics to {out_path}")


if __name__ == '__main__':
    generate()
