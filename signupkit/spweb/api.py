import asyncio
import logging
import time

from flask import Flask, jsonify, request, render_template

from signupkit.availability import is_email_available, status_text
from signupkit.config import load_config, seconds
from signupkit.drafts import DraftStore
from signupkit.errors import SignupValidationError, StorageError
from signupkit.form import SignupForm
from signupkit.generator import generate_signup_password
from signupkit.routes import ROUTES, page_title
from signupkit.suggestions import hints_for
from signupkit.strength import evaluate

logger = logging.getLogger(__name__)

CFG = load_config()

app = Flask(__name__)
app.config.update(
    AVAILABILITY_DELAY=seconds(CFG, "availability_delay_ms"),
    SUBMIT_DELAY=seconds(CFG, "submit_delay_ms"),
    DRAFT_PATH=CFG.get("draft_path"),
)

_TEMPLATES = {"/": "home.html", "/form": "form.html", "/about": "about.html"}


def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _drafts():
    return DraftStore(app.config.get("DRAFT_PATH"))


def _page(path):
    return render_template(_TEMPLATES[path], title=page_title(path), path=path, routes=ROUTES)


# ---------------- pages ----------------

@app.route('/')
def home():
    return _page('/')


@app.route('/form')
def form_page():
    return _page('/form')


@app.route('/about')
def about():
    return _page('/about')


@app.errorhandler(404)
def not_found(_e):
    path = request.path
    return render_template('404.html', title=page_title(path), path=path, routes=ROUTES), 404


# ---------------- JSON API ----------------

@app.errorhandler(StorageError)
def storage_failed(e):
    logger.warning("draft storage failed: %s", e)
    return jsonify({'error': e.message}), 503


@app.route('/api/strength', methods=['POST'])
def strength_route():
    password = _body().get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    report = evaluate(password)
    result = report.to_dict()
    result['suggestions'] = hints_for(report)
    return jsonify(result)


@app.route('/api/email-availability', methods=['POST'])
def availability_route():
    email = str(_body().get('email', '')).strip()
    if not email:
        return jsonify({'email': '', 'available': None, 'status': ''})
    time.sleep(app.config['AVAILABILITY_DELAY'])
    available = is_email_available(email)
    return jsonify({'email': email, 'available': available, 'status': status_text(available)})


@app.route('/api/generate', methods=['POST'])
def generate_route():
    return jsonify({'password': generate_signup_password()})


@app.route('/api/signup', methods=['POST'])
def signup_route():
    data = _body()
    form = SignupForm(drafts=_drafts())
    form.email = str(data.get('email', ''))
    form.password = str(data.get('password', ''))
    form.confirm = str(data.get('confirmPassword', ''))
    form.terms = data.get('terms') is True
    try:
        result = asyncio.run(form.submit(app.config['SUBMIT_DELAY']))
    except SignupValidationError as e:
        logger.debug("signup rejected: %s", e)
        return jsonify({'ok': False, 'errors': e.errors}), 400
    return jsonify(result)


@app.route('/api/draft', methods=['GET'])
def draft_get():
    return jsonify(_drafts().load() or {})


@app.route('/api/draft', methods=['PUT'])
def draft_put():
    data = _body()
    email = data.get('email', '')
    terms = data.get('terms', False)
    if not isinstance(email, str) or not isinstance(terms, bool):
        return jsonify({'error': 'email must be a string and terms a boolean'}), 400
    _drafts().save(email, terms)
    return jsonify({'email': email.strip(), 'terms': terms})


@app.route('/api/draft', methods=['DELETE'])
def draft_delete():
    _drafts().clear()
    return '', 204


if __name__ == "__main__":
    app.run(debug=True)
