"""Post sample reviews to a running server and print what comes back."""
import argparse

import requests

import config

samples = [
    'good morning bro',
    'i hate this so much',
    'this is the worst movie ever',
    'i love this',
    'terrible, do not watch',
]


def post_samples(base_url, texts, timeout=10):
    results = []
    for s in texts:
        r = requests.post(base_url.rstrip('/') + '/predict', json={'text': s}, timeout=timeout)
        try:
            body = r.json()
        except ValueError:
            body = r.text
        results.append((s, r.status_code, body))
    return results


if __name__ == '__main__':
    p = argparse.ArgumentParser()
    p.add_argument('texts', nargs='*')
    p.add_argument('--url', default=f'http://{config.HOST}:{config.PORT}')
    args = p.parse_args()
    for s, status, body in post_samples(args.url, args.texts or samples):
        print(s, '->', status, body)
