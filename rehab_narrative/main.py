"""Main entry point for Rehab Narrative."""

import logging
import sys

from rehab_narrative.config import get_settings


def setup_logging():
    """Configure logging based on settings."""
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main():
    """Main entry point - runs CLI."""
    setup_logging()

    from rehab_narrative.cli.commands import app

    app()


def serve():
    """Run the HTTP API with uvicorn."""
    import uvicorn

    setup_logging()
    settings = get_settings()

    from rehab_narrative.api.app import create_app

    uvicorn.run(create_app(), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
