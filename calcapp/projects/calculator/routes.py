"""
Calculator - browser UI backed by the Python engine.
The page posts each input together with its current state and redraws from
the response; no calculator state is kept on the server.
"""

import logging

from flask import Blueprint, jsonify, render_template, request

from calcapp.projects.calculator.core.display import BUTTON_ROWS, view_model
from calcapp.projects.calculator.core.engine import (
    INITIAL_STATE,
    CalculatorState,
    InvalidInput,
    perform,
)
from calcapp.projects.calculator.core.keymap import client_key_table, resolve_key
from calcapp.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

calculator_bp = Blueprint(
    "calculator",
    __name__,
    template_folder="templates",
)


def _state_from_body(data):
    """Current state from a request body; a missing state means a fresh calculator."""
    raw_state = data.get("state")
    if raw_state is None:
        return INITIAL_STATE
    return CalculatorState.from_dict(raw_state)


@calculator_bp.route("/")
def index():
    """Display the calculator"""
    log_project_visit("calculator", "Calculator")
    return render_template(
        "calculator/index.html",
        view=view_model(INITIAL_STATE),
        button_rows=BUTTON_ROWS,
        key_table=client_key_table(),
    )


@calculator_bp.route("/api/press", methods=["POST"])
def api_press():
    """Apply one button action. Returns {state, display, summary} or {error}."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    try:
        state = _state_from_body(data)
        next_state = perform(state, data.get("action"), data.get("value"))
    except InvalidInput as e:
        logger.warning("Rejected calculator press: %s", e)
        return jsonify({"error": str(e)}), 400

    return jsonify(view_model(next_state))


@calculator_bp.route("/api/key", methods=["POST"])
def api_key():
    """Apply one key press. Unbound keys come back unchanged with handled=False."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    try:
        state = _state_from_body(data)
    except InvalidInput as e:
        logger.warning("Rejected calculator key: %s", e)
        return jsonify({"error": str(e)}), 400

    binding = resolve_key(data.get("key"))
    if binding is None:
        return jsonify({**view_model(state), "handled": False, "prevent_default": False})

    next_state = perform(state, binding.action, binding.value)
    return jsonify({
        **view_model(next_state),
        "handled": True,
        "prevent_default": binding.prevent_default,
    })
