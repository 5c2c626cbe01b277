"""Turn review text into the fixed-length integer batch the model expects.

normalize_text -> encode_tokens -> pad_sequences
"""
import re

import numpy as np

from config import MAXLEN, OOV_INDEX, PAD_VALUE

# only these characters are stripped; the model was trained on text cleaned this way
STRIP_RE = re.compile(r'[.,!?()]')

_SIDES = ('pre', 'post')


def normalize_text(text):
    """Lowercase, drop `.,!?()` and split on single spaces.

    Runs of spaces give empty tokens, e.g. "a  b" -> ["a", "", "b"].
    """
    t = (text or '').lower()
    t = STRIP_RE.sub('', t)
    return t.split(' ')


def encode_tokens(tokens, word_index, oov_index=OOV_INDEX, num_words=None):
    seq = []
    for w in tokens:
        idx = word_index.get(w)
        if idx is None or (num_words is not None and idx >= num_words):
            seq.append(oov_index)
        else:
            seq.append(int(idx))
    return seq


def pad_sequences(sequences, maxlen=MAXLEN, padding='post', truncating='post', value=PAD_VALUE, dtype='int32'):
    """Pad or truncate each sequence to exactly ``maxlen`` items.

    Args:
        sequences: iterable of integer sequences (a batch, even for one text)
        maxlen: target length; None means the longest sequence in the batch
        padding: 'pre' or 'post', where fill values go
        truncating: 'pre' or 'post', which end is dropped from long sequences
        value: fill value
    Returns:
        numpy array of shape (len(sequences), maxlen)
    """
    if padding not in _SIDES:
        raise ValueError(f'Padding type "{padding}" not understood')
    if truncating not in _SIDES:
        raise ValueError(f'Truncating type "{truncating}" not understood')

    sequences = [list(s) for s in sequences]
    if maxlen is None:
        maxlen = max((len(s) for s in sequences), default=0)
    if maxlen < 0:
        raise ValueError(f'maxlen must be non-negative, got {maxlen}')
    if not sequences or maxlen == 0:
        return np.full((len(sequences), maxlen), value, dtype=dtype)

    # TensorFlow is heavy; import it only when text is actually vectorized
    from tensorflow.keras.utils import pad_sequences as keras_pad_sequences
    return keras_pad_sequences(sequences, maxlen=maxlen, dtype=dtype, padding=padding,
                               truncating=truncating, value=value)


def prepare_batch(texts, word_index, maxlen=MAXLEN, padding='post', truncating='post',
                  oov_index=OOV_INDEX, num_words=None):
    if isinstance(texts, str):
        texts = [texts]
    seqs = [encode_tokens(normalize_text(t), word_index, oov_index=oov_index, num_words=num_words)
            for t in texts]
    return pad_sequences(seqs, maxlen=maxlen, padding=padding, truncating=truncating)
