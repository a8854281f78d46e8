from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .extensions import db
from .errors import ServiceError, StorageError
from .seed import init_db_command, seed_command

# Blueprints
from .teams import teams_bp
from .users import users_bp
from .pull_requests import pull_requests_bp
from .stats import stats_bp

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    415: "BAD_REQUEST",
}


def create_app(config_class="config.DevConfig"):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)

    # No migration tooling; tables come from the models
    if app.config.get("AUTO_CREATE_TABLES", True):
        with app.app_context():
            db.create_all()
        app.logger.info("✅ Database tables ready.")

    # Register blueprints
    app.register_blueprint(teams_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(pull_requests_bp)
    app.register_blueprint(stats_bp)

    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_command)

    @app.route("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    # Every failure leaves in the same envelope: {"error": {"code", "message"}}
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        return jsonify(e.to_dict()), e.status

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        code = HTTP_ERROR_CODES.get(e.code, "HTTP_ERROR")
        return jsonify({"error": {"code": code, "message": e.description}}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.error(f"Unhandled error: {e}", exc_info=True)
        err = StorageError("internal error")
        return jsonify(err.to_dict()), err.status

    return app
