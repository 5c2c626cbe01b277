import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent

ENV_PATH = ROOT / '.env'
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

MODEL_DIR = Path(os.getenv('SENTIMENT_MODEL_DIR', str(ROOT / 'model')))
MODEL_PATH = Path(os.getenv('SENTIMENT_MODEL_PATH', str(MODEL_DIR / 'sentiment_model.h5')))
WORD_INDEX_PATH = Path(os.getenv('SENTIMENT_WORD_INDEX_PATH', str(MODEL_DIR / 'word_index.json')))

# sequence length the exported model was trained with
MAXLEN = 236
PAD_VALUE = 0
OOV_INDEX = 1
THRESHOLD = 0.5

_num_words = os.getenv('SENTIMENT_NUM_WORDS', '')
NUM_WORDS = int(_num_words) if _num_words else None

HOST = os.getenv('HOST', '127.0.0.1')
PORT = int(os.getenv('PORT', '5000'))
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'


def configure_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
