"""Application entry point for the mediarecords backend server."""

from mediarecords.app import App
from mediarecords.config import Config
from mediarecords.logging import setup_logging
from mediarecords.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
