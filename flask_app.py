from flask import Flask, request, jsonify, render_template_string
import logging

import config
from errors import NotReadyError
from sentiment_model import SentimentModel

logger = logging.getLogger(__name__)

# Single-page review form (Bootstrap)
HTML = '''
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Movie Review Sentiment</title>
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    body { padding: 1.5rem; background: #f8fafc; }
    .review { min-height: 180px; }
    .result { margin-top: 1rem; padding: 0.75rem 1rem; border-radius: 8px; }
    .result.positive { background: #bbf7d0; }
    .result.negative { background: #fecaca; }
    .confidence { height:8px; background:#e6e7ee; border-radius:4px; overflow:hidden; margin-top:6px; }
    .confidence > div { height:100%; }
  </style>
</head>
<body>
  <div class="container" style="max-width: 760px">
    <h1 class="h4">Movie Review Sentiment</h1>
    <p class="text-muted small">
      Type a movie review and press Analyze. The review is split into words, mapped to the
      model vocabulary and padded to <strong>{{ maxlen }}</strong> tokens before scoring.
    </p>

    <div id="status" class="alert alert-secondary small" role="status">Loading model...</div>

    <form id="form">
      <textarea id="review" name="review" class="form-control review"
                placeholder="Type a movie review here..." aria-label="movie review"></textarea>
      <div class="mt-2">
        <button id="submitBtn" type="submit" class="btn btn-primary" disabled>Analyze</button>
      </div>
    </form>

    <div id="result" aria-live="polite"></div>
  </div>

  <script>
    const form = document.getElementById('form');
    const review = document.getElementById('review');
    const submitBtn = document.getElementById('submitBtn');
    const statusEl = document.getElementById('status');
    const resultEl = document.getElementById('result');
    let ready = false;

    function showStatus(cls, text){ statusEl.className = 'alert small ' + cls; statusEl.textContent = text; }

    async function pollStatus(){
      try{
        const s = await fetch('/api/status').then(r=>r.json());
        if(s.state === 'ready'){
          ready = true; submitBtn.disabled = false;
          showStatus('alert-success', 'Model ready.');
          return;
        }
        if(s.state === 'failed'){
          showStatus('alert-danger', 'Model failed to load: ' + (s.error || 'unknown error') + '. Reload the server to try again.');
          return;
        }
      } catch(e){ /* server not reachable yet */ }
      setTimeout(pollStatus, 1000);
    }

    function showResult(j){
      resultEl.innerHTML = '';
      const box = document.createElement('div');
      box.className = 'result ' + (j.sentiment === 'Positive' ? 'positive' : 'negative');
      const strong = document.createElement('strong'); strong.textContent = 'Sentiment: ';
      box.appendChild(strong);
      box.appendChild(document.createTextNode(j.sentiment + ' (' + j.confidence_text + ')'));
      const conf = document.createElement('div'); conf.className = 'confidence';
      const inner = document.createElement('div'); inner.style.width = Math.round(j.confidence) + '%';
      inner.style.background = j.sentiment === 'Positive' ? '#16a34a' : '#dc2626';
      conf.appendChild(inner); box.appendChild(conf);
      resultEl.appendChild(box);
    }

    form.addEventListener('submit', async (e)=>{
      e.preventDefault();
      if(!ready){ alert('Model is not loaded yet'); return; }
      submitBtn.disabled = true;
      try{
        const res = await fetch('/predict', {method:'POST', headers:{'Content-Type':'application/json'}, body: JSON.stringify({text: review.value})});
        const j = await res.json().catch(()=>({error: res.statusText}));
        if(!res.ok){
          if(res.status === 503){ alert('Model is not loaded yet'); }
          else { resultEl.textContent = 'Error: ' + (j.error || res.status); }
        } else {
          showResult(j);
        }
      } catch(err){
        resultEl.textContent = 'Error: ' + (err.message || err);
      } finally{
        submitBtn.disabled = !ready;
      }
    });

    pollStatus();
  </script>
</body>
</html>
'''


def create_app(sentiment=None, start_loading=True):
    app = Flask(__name__)
    if sentiment is None:
        sentiment = SentimentModel()

    @app.route('/')
    def index():
        return render_template_string(HTML, maxlen=sentiment.maxlen)

    @app.route('/api/status')
    def api_status():
        err = sentiment.error
        return jsonify({
            'state': sentiment.state.value,
            'error': str(err) if err is not None else None,
            'maxlen': sentiment.maxlen,
        })

    @app.route('/predict', methods=['POST'])
    def predict():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        text = data.get('text') or ''
        if not isinstance(text, str) or not text.strip():
            return jsonify({'error': 'empty text'}), 400

        try:
            result = sentiment.analyze(text)
        except NotReadyError as e:
            logger.warning('Prediction requested before model was ready (state=%s)', e.state.value)
            return jsonify({'error': 'model not ready', 'state': e.state.value}), 503
        except Exception as e:
            logger.exception('Prediction failed')
            return jsonify({'error': str(e)}), 500

        logger.info('predict: chars=%d score=%.4f sentiment=%s', len(text), result.score, result.label)
        return jsonify(result.to_dict())

    if start_loading:
        sentiment.load_async()
    return app


if __name__ == '__main__':
    config.configure_logging()
    create_app().run(host=config.HOST, port=config.PORT)
