"""Read-only word -> id mapping exported by the training pipeline.

Id 0 is reserved for padding and id 1 for out-of-vocabulary words.
"""
import json
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from errors import ArtifactLoadError

logger = logging.getLogger(__name__)

PAD_INDEX = 0
OOV_INDEX = 1


class WordIndex(Mapping):

    def __init__(self, mapping, oov_index=OOV_INDEX):
        self._index = MappingProxyType(dict(mapping))
        self.oov_index = oov_index

    @classmethod
    def from_json(cls, path, oov_index=OOV_INDEX):
        """Load a JSON object of lowercase word -> positive integer id."""
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            raise ArtifactLoadError(f'could not read word index {path}: {e}', path=path) from e
        if not isinstance(raw, dict):
            raise ArtifactLoadError(f'word index {path} is not a JSON object', path=path)

        index = {}
        for word, idx in raw.items():
            # bools are ints in Python but never valid ids
            if (isinstance(idx, bool) or not isinstance(idx, (int, float))
                    or (isinstance(idx, float) and (not math.isfinite(idx) or not idx.is_integer()))):
                raise ArtifactLoadError(f'word index {path}: id for {word!r} is not an integer: {idx!r}', path=path)
            index[word] = int(idx)

        reserved = [w for w, i in index.items() if i == PAD_INDEX]
        if reserved:
            logger.warning('word index %s maps %d word(s) to the padding id %d', path, len(reserved), PAD_INDEX)
        negative = [w for w, i in index.items() if i < 0]
        if negative:
            logger.warning('word index %s has %d negative id(s), e.g. %r', path, len(negative), negative[0])
        logger.info('Loaded word index from %s (%d words)', path, len(index))
        return cls(index, oov_index=oov_index)

    def lookup(self, token):
        return self._index.get(token, self.oov_index)

    def __getitem__(self, key):
        return self._index[key]

    def __iter__(self):
        return iter(self._index)

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return f'WordIndex({len(self)} words, oov_index={self.oov_index})'
