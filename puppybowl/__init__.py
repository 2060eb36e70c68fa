import logging
import os
import sys

from flask import Flask

from .config import settings
from .security.config import init_security, limit_mutations


def configure_logging(level: str = "INFO", log_file: str = "") -> logging.Logger:
    """Package logger setup shared by the web app and the CLI.

    Safe to call more than once: handlers from an earlier call are replaced,
    so the latest level and log file always apply.
    """
    logger = logging.getLogger(__name__)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def create_app(test_config=None):
    app = Flask(
        __name__,
        template_folder=os.path.join(os.path.dirname(__file__), "..", "templates"),
    )

    # Load configuration from settings
    app.config.from_mapping(
        SECRET_KEY=settings.SECRET_KEY,
        DEBUG=settings.DEBUG,
        PUPPY_BOWL_API_URL=settings.PUPPY_BOWL_API_URL,
        COHORT_NAME=settings.COHORT_NAME,
        REQUEST_TIMEOUT=settings.REQUEST_TIMEOUT,
        LOG_LEVEL=settings.LOG_LEVEL,
        LOG_FILE=settings.LOG_FILE,
        RATELIMIT_STORAGE_URL=settings.RATELIMIT_STORAGE_URL,
        ROSTER_CLIENT=None,
    )

    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"], app.config["LOG_FILE"])

    from .api.client import PuppyBowlClient
    from .state import RosterState

    client = app.config.get("ROSTER_CLIENT") or PuppyBowlClient(
        app.config["PUPPY_BOWL_API_URL"],
        app.config["COHORT_NAME"],
        timeout=app.config["REQUEST_TIMEOUT"],
    )

    # attach to app for blueprints to use
    app.extensions["roster_client"] = client
    app.extensions["roster_state"] = RosterState()

    limiter = init_security(app)

    from .routes import api_bp, roster_bp

    app.register_blueprint(roster_bp)
    app.register_blueprint(api_bp)

    # Rate limit POST/DELETE on both blueprints
    limit_mutations(limiter, roster_bp, api_bp)

    logging.getLogger(__name__).info(
        f"Roster app ready for cohort {app.config['COHORT_NAME']} at {client.players_url}"
    )

    return app
