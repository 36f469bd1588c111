"""
Prakrit Verb Conjugator - HTTP API
Flask application exposing conjugation tables as JSON
"""

from typing import Dict

from flask import Flask, jsonify, request

import config
from conjugator import all_categories, conjugate
from errors import ConjugationError
from models import SLOT_ORDER, Category, Encoding
from transliterator import to_canonical

app = Flask(__name__)


def _with_cors(response, methods='GET, POST'):
    response.headers.add('Access-Control-Allow-Origin', '*')
    response.headers.add('Access-Control-Allow-Headers', 'Content-Type')
    response.headers.add('Access-Control-Allow-Methods', methods)
    return response


def _error(message: str, status: int = 400):
    return _with_cors(jsonify({'success': False, 'error': message})), status


def request_category(data: Dict) -> Category:
    return Category.parse(
        data.get('tense') or 'present',
        data.get('dialect') or 'maharashtri',
        data.get('voice') or 'active',
    )


def conjugate_request(data: Dict) -> Dict:
    """
    Conjugate the root described by a request payload

    Raises:
        ValueError: unknown tense, dialect, voice or encoding name
        ConjugationError: invalid root or unmappable input
    """
    category = request_category(data)
    input_encoding = Encoding.parse(data.get('input_encoding') or config.INPUT_ENCODING)
    output_encoding = Encoding.parse(data.get('output_encoding') or config.OUTPUT_ENCODING)

    root = to_canonical(data['root'].strip(), input_encoding)
    table = conjugate(root, category).transliterated(output_encoding)

    result = table.as_dict()
    result['success'] = True
    result['encoding'] = output_encoding.value
    return result


@app.route('/', methods=['GET'])
def index():
    return _with_cors(jsonify({
        'service': 'Prakrit verb conjugator',
        'dialects': ['maharashtri', 'shauraseni', 'magadhi'],
        'endpoints': {
            'POST /api/conjugate': '{root, tense, dialect, voice, input_encoding, output_encoding}',
            'GET /api/categories': 'supported tense/dialect/voice combinations',
        },
    }))


@app.route('/api/conjugate', methods=['POST', 'OPTIONS'])
def api_conjugate():
    """API endpoint for conjugation"""
    if request.method == 'OPTIONS':
        return _with_cors(jsonify({'status': 'ok'}), methods='POST')

    data = request.get_json(force=True, silent=True)
    if not data:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        return _error('Request body must be a JSON object')

    root = data.get('root', '')
    if not isinstance(root, str) or not root.strip():
        return _error('Please provide a Prakrit verb root')

    try:
        result = conjugate_request(data)
    except ValueError as e:
        return _error(str(e))
    except ConjugationError as e:
        return _error(f"{e.message} [{root.strip()}, {request_category(data)}]")

    return _with_cors(jsonify(result))


@app.route('/api/categories', methods=['GET'])
def api_categories():
    return _with_cors(jsonify({
        'categories': [category.as_dict() for category in all_categories()],
        'slots': [slot.value for slot in SLOT_ORDER],
    }))


def run_server():
    print(f"Serving Prakrit verb conjugator on port {config.PORT}")
    app.run(host='0.0.0.0', port=config.PORT, debug=config.FLASK_DEBUG)


if __name__ == '__main__':
    run_server()
