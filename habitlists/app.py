"""
Habit Lists API
JSON API over colors, lists, entries, habits and days.
"""

import time
import logging

from flask import Flask, request, g

from habitlists import config
from habitlists.logs import setup_logging
from habitlists.seed import open_store
from habitlists.responses import create_response, failure
from habitlists.handlers import colors, lists, entries, habits, days

HANDLERS = {
    "colors": colors.handle,
    "lists": lists.handle,
    "entries": entries.handle,
    "habits": habits.handle,
    "days": days.handle,
}

METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]


def create_app(store=None, **overrides):
    app = Flask(__name__)
    app.config.update(config.as_flask_config())
    app.config.update(overrides)

    setup_logging(app)

    if store is None:
        store = open_store(app.config["DATABASE_PATH"], seed=app.config["SEED_SAMPLE_DATA"])
    app.extensions["store"] = store
    app.logger.info("App starting — env=%s, db=%s", app.config["ENV_NAME"], store.path)

    # ── Request lifecycle logging & security headers ─────────────────────
    @app.before_request
    def _log_request_start():
        g.request_start = time.time()

    @app.after_request
    def _log_and_secure(response):
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if request.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store"

        duration = round((time.time() - g.get("request_start", time.time())) * 1000, 1)
        level = logging.WARNING if response.status_code >= 400 else logging.DEBUG
        app.logger.log(
            level,
            "%s %s %s %sms — ip=%s",
            request.method,
            request.path,
            response.status_code,
            duration,
            request.remote_addr,
        )
        return response

    # ── Error handlers ───────────────────────────────────────────────────
    @app.errorhandler(404)
    def _not_found(e):
        return failure("Not Found", 404)

    @app.errorhandler(405)
    def _not_allowed(e):
        return failure("Method not allowed or invalid path", 405)

    @app.errorhandler(413)
    def _too_large(e):
        return failure("Request too large", 413)

    @app.errorhandler(500)
    def _server_error(e):
        app.logger.exception("Internal server error: %s", e)
        return failure("Internal server error", 500)

    # ── API router ───────────────────────────────────────────────────────
    @app.route("/api/<resource>", methods=METHODS, strict_slashes=False)
    @app.route("/api/<resource>/<path:rest>", methods=METHODS, strict_slashes=False)
    def dispatch(resource, rest=""):
        handler = HANDLERS.get(resource)
        if handler is None:
            return failure("Not Found", 404)
        parts = [p for p in request.path.split("/") if p]
        return handler(store, request.method, parts)

    # ── Health Check ─────────────────────────────────────────────────────
    @app.route("/health")
    def health_check():
        """Liveness/readiness probe for load balancers and orchestrators."""
        try:
            store.ping()
            return create_response({"status": "healthy", "env": app.config["ENV_NAME"]})
        except Exception as e:
            app.logger.error("Health check failed: %s", e)
            return create_response({"status": "unhealthy", "error": str(e)}, 503)

    return app


def main():
    app = create_app()
    debug = not config.IS_PROD
    app.logger.info("Starting dev server on port %d (debug=%s)", config.PORT, debug)
    print(f"\n  Habit Lists API → http://127.0.0.1:{config.PORT}/api\n")
    # reloader would open the database twice
    app.run(debug=debug, host="0.0.0.0", port=config.PORT, use_reloader=False)


if __name__ == "__main__":
    main()
