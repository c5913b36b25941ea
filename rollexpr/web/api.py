"""
Roll API Blueprint.

Endpoints:
- GET  /api/roll?notation=3d6+2  - Roll once
- POST /api/roll                 - Roll with options (JSON body)
- GET  /api/health               - Liveness check
"""

import logging
from typing import Any, Dict

import jsonschema
from flask import Blueprint, current_app, jsonify, request

from rollexpr.core.result import ErrorCode
from rollexpr.rng import DiceRoller, parse

logger = logging.getLogger(__name__)

roll_bp = Blueprint('roll', __name__)

ROLL_REQUEST_SCHEMA = {
    "type": "object",
    "properties": {
        "notation": {"type": "string"},
        "times": {"type": "integer", "minimum": 1},
        "seed": {"type": "integer"}
    },
    "required": ["notation"],
    "additionalProperties": False
}


def _invalid_input(message: str):
    return jsonify({
        'success': False,
        'error': message,
        'error_code': ErrorCode.INVALID_INPUT.value
    }), 400


def perform_roll(payload: Dict[str, Any]):
    """
    Validate a roll request, then parse and evaluate it.

    Args:
        payload: Request data matching ROLL_REQUEST_SCHEMA

    Returns:
        Flask response tuple
    """
    try:
        jsonschema.validate(payload, ROLL_REQUEST_SCHEMA)
    except jsonschema.ValidationError as e:
        return _invalid_input(e.message)

    times = payload.get('times', 1)
    max_times = current_app.config['MAX_TIMES']
    if times > max_times:
        return _invalid_input(f"times must be at most {max_times}")

    result = parse(payload['notation'])
    if not result:
        return jsonify({
            'success': False,
            'error': result.error,
            'error_code': result.error_code
        }), 400

    expression = result.data
    dice_count = sum(dice.count for dice in expression.iter_dice())
    max_dice = current_app.config['MAX_DICE']
    if dice_count > max_dice:
        return _invalid_input(f"notation rolls {dice_count} dice, at most {max_dice} allowed")

    roller = DiceRoller(seed=payload.get('seed', current_app.config['SEED']))
    totals = [expression.evaluate(roller) for _ in range(times)]

    return jsonify({
        'success': True,
        'notation': expression.render(),
        'total': totals[0],
        'totals': totals,
        'min': expression.min_value(),
        'max': expression.max_value()
    })


@roll_bp.route('/api/roll', methods=['GET'])
def api_roll_get():
    """
    JSON API: Roll the notation given in the query string.

    Query args:
        notation: Dice notation (required)
        times: Number of rolls (optional)
        seed: Random seed (optional)
    """
    payload: Dict[str, Any] = {}
    if 'notation' in request.args:
        payload['notation'] = request.args['notation']
    for key in ('times', 'seed'):
        if key in request.args:
            value = request.args.get(key, type=int)
            if value is None:
                return _invalid_input(f"{key} must be an integer")
            payload[key] = value

    try:
        return perform_roll(payload)
    except Exception as e:
        logger.error(f"Error rolling {payload!r}: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e),
            'error_code': ErrorCode.UNEXPECTED_ERROR.value
        }), 500


@roll_bp.route('/api/roll', methods=['POST'])
def api_roll_post():
    """
    JSON API: Roll dice.

    Request JSON:
        {
            "notation": "3d12 - 8 + 10d8",
            "times": 3,
            "seed": 42
        }

    Returns:
        {
            "success": true,
            "notation": "3d12 - 8 + 10d8",
            "total": 41,
            "totals": [41, 37, 52],
            "min": 5,
            "max": 108
        }
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return _invalid_input('Request body must be JSON')

    try:
        return perform_roll(payload)
    except Exception as e:
        logger.error(f"Error rolling {payload!r}: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e),
            'error_code': ErrorCode.UNEXPECTED_ERROR.value
        }), 500


@roll_bp.route('/api/health')
def api_health():
    """JSON API: Liveness check."""
    return jsonify({'success': True})
