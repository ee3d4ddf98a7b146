"""Application entry point for Career Hub backend server."""

from careerhub.app import App
from careerhub.config import Config
from careerhub.logging import setup_logging
from careerhub.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
