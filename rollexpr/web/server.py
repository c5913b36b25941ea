"""
Web interface for rollexpr.

Flask app exposing the roll API:
- /api/roll: parse, roll and render dice notation
- /api/health: liveness check
"""

import logging
from typing import Optional

from flask import Flask

from rollexpr.core.config import Config, get_config
from rollexpr.core.logging_config import setup_logging
from rollexpr.web.api import roll_bp

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> Flask:
    """
    Create the Flask app.

    Args:
        config: Configuration to use (default: global config)

    Returns:
        Flask app
    """
    config = config or get_config()

    app = Flask(__name__)
    app.config['SEED'] = config.seed
    app.config['MAX_TIMES'] = config.max_times
    app.config['MAX_DICE'] = config.max_dice

    app.register_blueprint(roll_bp)

    return app


def main():
    """Run the development server."""
    config = get_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    app = create_app(config)
    logger.info(f"Starting rollexpr API on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == '__main__':
    main()
