import logging
import os
from datetime import timedelta

from dotenv import load_dotenv
from flask import Flask, g, request

from app.grimoire.config import check_production_config, load_config

# Platform modules first: app.grimoire.models registers every module's tables.
from app.grimoire.db import init_db, teardown_db_session
from app.grimoire.errors import register_error_handlers
from app.grimoire.auth import bp as auth_bp, load_current_user
from app.grimoire.admin import bp as admin_bp
from app.grimoire.routes import bp as routes_bp
from app.grimoire.modules.rotes.routes import bp as rotes_bp
from app.grimoire.modules.backgrounds.routes import bp as backgrounds_bp
from app.grimoire.modules.resources.routes import bp as resources_bp
from app.grimoire.modules.merits.routes import bp as merits_bp
from app.grimoire.modules.characters.routes import bp as characters_bp
from app.grimoire.modules.site_settings.routes import bp as site_settings_bp
from app.grimoire.modules.mage_groups.routes import bp as mage_groups_bp
from app.grimoire.modules.character_creation.routes import bp as character_creation_bp
from app.grimoire.modules.guide_content.routes import bp as guide_content_bp


def _configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL") or "INFO"), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger("app.grimoire").setLevel(level)


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(hours=8)
    app.config["SESSION_REFRESH_EACH_REQUEST"] = True
    app.json.sort_keys = False

    _configure_logging(app)

    # Production guardrails (fail fast with clear logs)
    check_production_config(app.config)

    init_db(app)

    def _dispose_engine_on_fork() -> None:
        if hasattr(os, "register_at_fork"):
            def _after_fork_child():
                engine = app.extensions.get("sqlalchemy_engine")
                if engine:
                    engine.dispose()
                    app.logger.info("Disposed DB engine after fork (pid=%s)", os.getpid())

            os.register_at_fork(after_in_child=_after_fork_child)

    _dispose_engine_on_fork()

    app.register_blueprint(routes_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(admin_bp, url_prefix="/api/admin")
    app.register_blueprint(rotes_bp, url_prefix="/api")
    app.register_blueprint(backgrounds_bp, url_prefix="/api")
    app.register_blueprint(resources_bp, url_prefix="/api")
    app.register_blueprint(merits_bp, url_prefix="/api")
    app.register_blueprint(characters_bp, url_prefix="/api")
    app.register_blueprint(site_settings_bp, url_prefix="/api")
    app.register_blueprint(mage_groups_bp, url_prefix="/api")
    app.register_blueprint(character_creation_bp, url_prefix="/api")
    app.register_blueprint(guide_content_bp, url_prefix="/api")

    app.before_request(load_current_user)
    app.teardown_appcontext(teardown_db_session)
    register_error_handlers(app)

    @app.after_request
    def _log_request(response):  # type: ignore[no-redef]
        if request.path.startswith(("/health", "/healthz")):
            return response
        app.logger.debug(
            "%s %s -> %s (request_id=%s)",
            request.method,
            request.path,
            response.status_code,
            getattr(g, "request_id", None),
        )
        return response

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
