"""Inference adapter around the exported Keras sentiment model.

The model and word index are loaded once (usually on a background thread at
startup). ``predict`` is only allowed once both are loaded; before that, or
after a failed load, it raises NotReadyError instead of returning a score.
"""
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import numpy as np

from config import MAXLEN, MODEL_PATH, NUM_WORDS, THRESHOLD, WORD_INDEX_PATH
from errors import ArtifactLoadError, NotReadyError
from text_prep import prepare_batch
from word_index import WordIndex

logger = logging.getLogger(__name__)


class ModelState(str, Enum):
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


@dataclass(frozen=True)
class PredictionResult:
    label: str
    confidence: float
    score: float

    @classmethod
    def from_score(cls, score, threshold=THRESHOLD):
        score = float(score)
        if score >= threshold:
            return cls('Positive', score * 100, score)
        return cls('Negative', (1 - score) * 100, score)

    @property
    def positive(self):
        return self.label == 'Positive'

    @property
    def confidence_text(self):
        return f'{self.confidence:.2f}%'

    def to_dict(self):
        return {
            'sentiment': self.label,
            'score': self.score,
            'confidence': round(self.confidence, 2),
            'confidence_text': self.confidence_text,
        }


def load_keras_model(path):
    path = Path(path)
    if not path.exists():
        raise ArtifactLoadError(f'model file not found: {path}', path=path)
    # TensorFlow is heavy; import it only when a model is actually loaded
    from tensorflow.keras.models import load_model
    try:
        return load_model(str(path), compile=False)
    except (OSError, ValueError) as e:
        raise ArtifactLoadError(f'could not load model {path}: {e}', path=path) from e


class SentimentModel:

    def __init__(self, model_path=MODEL_PATH, word_index_path=WORD_INDEX_PATH, maxlen=MAXLEN,
                 num_words=NUM_WORDS, threshold=THRESHOLD, model_loader=load_keras_model):
        self.model_path = Path(model_path)
        self.word_index_path = Path(word_index_path)
        self.maxlen = maxlen
        self.num_words = num_words
        self.threshold = threshold
        self._model_loader = model_loader

        self._model = None
        self._word_index = None
        self._state = ModelState.UNINITIALIZED
        self._error = None
        self._lock = threading.Lock()
        self._done = threading.Event()

    @property
    def state(self):
        return self._state

    @property
    def ready(self):
        return self._state is ModelState.READY

    @property
    def error(self):
        return self._error

    @property
    def word_index(self):
        return self._word_index

    def _begin_loading(self):
        with self._lock:
            if self._state is not ModelState.UNINITIALIZED:
                return False
            self._state = ModelState.LOADING
            return True

    def load(self):
        """Load model and word index synchronously.

        Raises ArtifactLoadError if either artifact can't be loaded; the
        model then stays FAILED for the rest of the process.
        """
        if not self._begin_loading():
            logger.debug('load() called in state %s, ignoring', self._state.value)
            return self._state
        self._run_load()
        if self._state is ModelState.FAILED:
            raise self._error
        return self._state

    def load_async(self):
        """Start loading on a daemon thread and return the thread."""
        if not self._begin_loading():
            logger.debug('load_async() called in state %s, ignoring', self._state.value)
            return None
        t = threading.Thread(target=self._run_load, name='artifact-loader', daemon=True)
        t.start()
        return t

    def _run_load(self):
        try:
            model = self._model_loader(self.model_path)
            logger.info('Model loaded from %s', self.model_path)
            word_index = WordIndex.from_json(self.word_index_path)
        except ArtifactLoadError as e:
            self._fail(e)
        except Exception as e:
            # anything the model loader raises (corrupt weights, bad graph) is a load failure
            self._fail(ArtifactLoadError(f'could not load artifacts: {e}', path=self.model_path))
        else:
            with self._lock:
                self._model = model
                self._word_index = word_index
                self._state = ModelState.READY
            logger.info('Sentiment model ready (maxlen=%d, vocabulary=%d)', self.maxlen, len(word_index))
        finally:
            self._done.set()

    def _fail(self, error):
        logger.error('Failed to load sentiment artifacts: %s', error, exc_info=error)
        with self._lock:
            self._error = error
            self._state = ModelState.FAILED

    def wait(self, timeout=None):
        self._done.wait(timeout)
        return self._state

    def predict(self, text):
        """Return the model score in [0, 1] for one review."""
        if self._state is not ModelState.READY:
            raise NotReadyError(self._state)
        batch = prepare_batch([text], self._word_index, maxlen=self.maxlen, num_words=self.num_words)
        out = self._model.predict(batch, verbose=0)
        return float(np.ravel(out)[0])

    def analyze(self, text):
        return PredictionResult.from_score(self.predict(text), threshold=self.threshold)
