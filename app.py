"""Launcher script for the sentiment app.

Behavior:
- Optionally install requirements from requirements.txt
- Check that the exported model and word_index.json are in place
- Start the Flask UI (flask_app.py)

Usage examples:
  python app.py                # install requirements, then start server
  python app.py --no-install   # don't run pip install
  python app.py --port 8000    # set port for Flask server
  python app.py --model path/to/model.h5 --word-index path/to/word_index.json

The model and word index come from the training pipeline; this script does not
train. On Windows, if you want to use the venv, activate it before running this script.
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path

# stdlib only: this script runs before requirements are installed
ROOT = Path(__file__).parent
REQUIREMENTS = ROOT / 'requirements.txt'
MODEL_DIR = Path(os.getenv('SENTIMENT_MODEL_DIR', str(ROOT / 'model')))
DEFAULT_MODEL = Path(os.getenv('SENTIMENT_MODEL_PATH', str(MODEL_DIR / 'sentiment_model.h5')))
DEFAULT_WORD_INDEX = Path(os.getenv('SENTIMENT_WORD_INDEX_PATH', str(MODEL_DIR / 'word_index.json')))
DEFAULT_HOST = os.getenv('HOST', '127.0.0.1')
DEFAULT_PORT = int(os.getenv('PORT', '5000'))


def find_venv_python(venv_path: Path):
    win_py = venv_path / 'Scripts' / 'python.exe'
    posix_py = venv_path / 'bin' / 'python'
    if win_py.exists():
        return str(win_py)
    if posix_py.exists():
        return str(posix_py)
    return None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Start the movie review sentiment demo')
    parser.add_argument('--no-install', action='store_true', help='skip pip install')
    parser.add_argument('--host', type=str, default=DEFAULT_HOST, help='host for Flask app')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT, help='port for Flask app')
    parser.add_argument('--model', type=Path, default=DEFAULT_MODEL, help='exported Keras model file')
    parser.add_argument('--word-index', type=Path, default=DEFAULT_WORD_INDEX, help='word_index.json file')
    parser.add_argument('--no-venv', action='store_true', help='do not create/use a .venv; run in the current interpreter')
    parser.add_argument('--create-venv', action='store_true', help='create a .venv if missing')
    parser.add_argument('--venv-path', type=str, default='.venv', help='path to virtualenv folder (default: .venv)')
    return parser.parse_args(argv)


def choose_python(args):
    """Decide which Python executable to use for subsequent steps."""
    use_python = sys.executable
    if args.no_venv:
        print('Running without creating/using a .venv (using current interpreter)')
        return use_python

    venv_path = Path(args.venv_path)
    if args.create_venv and not venv_path.exists():
        print('Creating virtual environment at', venv_path)
        subprocess.check_call([sys.executable, '-m', 'venv', str(venv_path)])

    if venv_path.exists():
        vpy = find_venv_python(venv_path)
        if vpy:
            use_python = vpy
        else:
            print('Warning: .venv exists but no python executable found inside; using current interpreter')
    return use_python


def missing_artifacts(model_path: Path, word_index_path: Path):
    return [p for p in (model_path, word_index_path) if not p.exists()]


def main(argv=None):
    args = parse_args(argv)
    use_python = choose_python(args)

    if not args.no_install and REQUIREMENTS.exists():
        print('Installing requirements from', REQUIREMENTS, 'using', use_python)
        subprocess.check_call([use_python, '-m', 'pip', 'install', '-r', str(REQUIREMENTS)])

    missing = missing_artifacts(args.model, args.word_index)
    if missing:
        for p in missing:
            print('Missing artifact:', p, file=sys.stderr)
        print('Export the model and word index from the training pipeline first.', file=sys.stderr)
        return 2

    env = dict(os.environ)
    env.update({
        'SENTIMENT_MODEL_PATH': str(args.model),
        'SENTIMENT_WORD_INDEX_PATH': str(args.word_index),
        'HOST': args.host,
        'PORT': str(args.port),
    })
    print('Starting Flask app (flask_app.py) on', f'{args.host}:{args.port}')
    subprocess.check_call([use_python, str(ROOT / 'flask_app.py')], env=env)
    return 0


if __name__ == '__main__':
    sys.exit(main())
