# File: vocabstack_app/config.py
# MỤC ĐÍCH: Cấu hình ứng dụng, đọc từ biến môi trường với giá trị mặc định.

import os

# File config.py nằm ở vocabstack_app/ nên đi lên 1 cấp để đến thư mục gốc.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "vocabstack.db")


def _env_bool(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Lớp cấu hình cho ứng dụng Flask.
    """
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Nguồn dữ liệu từ vựng: URL (nếu có) được ưu tiên hơn file JSON cục bộ
    VOCAB_DATA_PATH = os.environ.get('VOCAB_DATA_PATH') or os.path.join(BASE_DIR, 'data', 'vocab.json')
    VOCAB_DATA_URL = os.environ.get('VOCAB_DATA_URL') or None
    VOCAB_FETCH_TIMEOUT = float(os.environ.get('VOCAB_FETCH_TIMEOUT', '10'))
    VOCAB_AUTOLOAD = _env_bool('VOCAB_AUTOLOAD', True)

    # Khóa cố định trong bảng key-value để lưu trạng thái ghi nhớ
    KNOWLEDGE_STORAGE_KEY = os.environ.get('KNOWLEDGE_STORAGE_KEY') or 'vocabKnowledge'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')

    # Đảm bảo thư mục database tồn tại khi ứng dụng khởi chạy
    os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
