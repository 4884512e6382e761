"""Server launcher for starting the Flask application"""
from typing import Optional
import logging

from src.core import Environment, ServerConfig
from src.server.application import ServerApplication
from src.server.services import configure_logging


logger = logging.getLogger(__name__)


class ServerLauncher:
    """Launcher class for the server application"""

    @staticmethod
    def create_application(config: Optional[ServerConfig] = None) -> ServerApplication:
        """
        Configure logging and create the Flask application.

        Args:
            config: Server configuration (default: read from environment)

        Returns:
            ServerApplication: Configured server application instance
        """
        config = config or ServerConfig.from_env()
        configure_logging(config.env)
        logger.info(
            f"Creating application - env: {config.env.value}, "
            f"storage: {config.storage_image_path}"
        )
        return ServerApplication(config)

    @staticmethod
    def run_server(app: ServerApplication) -> None:
        """
        Run the Flask development server on the configured host and port.

        Debug mode is enabled only for the local environment.

        Args:
            app: ServerApplication instance to run
        """
        config = app.config
        debug = config.env == Environment.LOCAL
        logger.info(
            f"Flask app '{app.app.name}' starting on "
            f"host {config.host}, port {config.port}. Debug mode: {debug}"
        )
        app.app.run(host=config.host, port=config.port, debug=debug, use_reloader=False)
