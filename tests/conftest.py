import json

import numpy as np
import pytest

from sentiment_model import SentimentModel


class StubModel:
    """Stands in for a Keras model: records batches and returns a fixed score."""

    def __init__(self, score):
        self.score = score
        self.batches = []

    def predict(self, batch, verbose=0):
        self.batches.append(batch)
        return np.array([[self.score]] * len(batch), dtype='float32')


@pytest.fixture
def vocab():
    return {"great": 2, "film": 3, "good": 5, "bad": 7, "movie": 9}


@pytest.fixture
def artifacts(tmp_path, vocab):
    model_path = tmp_path / "sentiment_model.h5"
    model_path.write_bytes(b"")
    word_index_path = tmp_path / "word_index.json"
    word_index_path.write_text(json.dumps(vocab), encoding="utf-8")
    return model_path, word_index_path


@pytest.fixture
def make_model(artifacts):
    model_path, word_index_path = artifacts

    def _make(score=0.82, **kwargs):
        stub = StubModel(score)
        sentiment = SentimentModel(model_path, word_index_path, model_loader=lambda path: stub, **kwargs)
        sentiment.stub = stub
        return sentiment

    return _make
