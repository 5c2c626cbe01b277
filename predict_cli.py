import argparse
import sys
from pathlib import Path

import config
from errors import ArtifactLoadError
from sentiment_model import SentimentModel


SAMPLES = [
    'This movie was absolutely fantastic!',
    'The film was boring and disappointing.',
    'I hate this so much',
    'this is the worst movie ever',
    'i love this',
    'amazing acting, well done',
]


def format_line(text, result):
    return f"{text!r} -> {result.score:.4f} -> {result.label} ({result.confidence_text})"


def main(argv=None, out=sys.stdout):
    p = argparse.ArgumentParser(description='Score movie reviews with the exported model')
    p.add_argument('texts', nargs='*', help='reviews to score (default: built-in samples)')
    p.add_argument('--model', type=Path, default=config.MODEL_PATH)
    p.add_argument('--word-index', type=Path, default=config.WORD_INDEX_PATH)
    args = p.parse_args(argv)

    if not args.model.exists() or not args.word_index.exists():
        print('Missing model or word_index.json', file=sys.stderr)
        return 2

    sentiment = SentimentModel(args.model, args.word_index)
    try:
        sentiment.load()
    except ArtifactLoadError as e:
        print(f'Could not load artifacts: {e}', file=sys.stderr)
        return 1

    for text in args.texts or SAMPLES:
        print(format_line(text, sentiment.analyze(text)), file=out)
    return 0


if __name__ == '__main__':
    config.configure_logging()
    sys.exit(main())
