import logging
from flask import Flask, Blueprint, current_app, request, jsonify, render_template, abort
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import Config
from content import SUCCESS_TEXT, page_context
from db import db
from form import (
    TEXT_FIELDS,
    FormError,
    FormValidationError,
    InvalidChoiceError,
    LeadCaptureForm,
    Succeeded,
)
from store import SqlAlchemyStore, build_store

logger = logging.getLogger(__name__)

site = Blueprint("site", __name__)

# HTTP status for each kind of failed submission
ERROR_STATUS = {
    "configuration": 503,
    "store": 502,
    "unexpected": 500,
}


def create_app(config=None, store=None):
    """Build the Flask app. `store` replaces the store built from config (e.g. a test double)."""
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    (config or Config.from_env()).apply(app)
    app.extensions["consultation_store"] = store or build_store(app)

    app.register_blueprint(site)
    return app


def get_store():
    return current_app.extensions["consultation_store"]


def new_form():
    form = LeadCaptureForm(get_store())
    form.subscribe(lambda f: logger.debug(f"Lead form changed: state={f.state.name}"))
    return form


def fill_form(form, data):
    """Copy submitted values onto the form, the way the page's inputs would."""
    for name in TEXT_FIELDS + ("interest_type",):
        value = data.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise FormValidationError([name], f"Field {name} must be text")
        form.update_field(name, value)


def render_page(form, validation_error=None):
    return render_template("index.html", form=form, validation_error=validation_error, **page_context())


# Routes
@site.route("/", methods=["GET"])
def index():
    return render_page(new_form())


@site.route("/", methods=["POST"])
def submit_consultation():
    form = new_form()
    try:
        fill_form(form, request.form)
        form.submit()
    except (FormValidationError, InvalidChoiceError) as e:
        return render_page(form, validation_error=str(e)), 400
    return render_page(form)


@site.route("/api/consultation-requests", methods=["POST"])
def create_consultation_request():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        abort(400, description="No data provided")

    form = new_form()
    try:
        fill_form(form, data)
        state = form.submit()
    except FormError as e:
        abort(400, description=str(e))

    if isinstance(state, Succeeded):
        return jsonify({"status": "success", "message": SUCCESS_TEXT}), 201
    return jsonify({"status": "error", "message": state.message}), ERROR_STATUS[state.kind]


@site.route("/health", methods=["GET"])
def health():
    return jsonify({"message": "GreenSetu site is running."})


@site.app_errorhandler(HTTPException)
def handle_http_error(e):
    if e.code >= 500:
        logger.error(f"{e.code} on {request.method} {request.path}: {e.description}")
    return jsonify({"error": e.name, "message": e.description}), e.code


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    if isinstance(app.extensions["consultation_store"], SqlAlchemyStore):
        with app.app_context():
            db.create_all()
    app.run(debug=app.config["DEBUG"])
