"""Entry points: `python -m src.main` for the development server, `create_app` for WSGI servers"""
from flask import Flask

from src.server import ServerLauncher


def create_app() -> Flask:
    """Factory function for creating the Flask app (for gunicorn)"""
    return ServerLauncher.create_application().app


def main() -> None:
    """Main entry point"""
    launcher = ServerLauncher()
    application = launcher.create_application()
    launcher.run_server(application)


if __name__ == "__main__":
    main()
