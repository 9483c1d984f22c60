#!/usr/bin/env python3
"""
Collection Browser - Main entry point
"""
import logging

from collection_browser.config import load_config, setup_logging
from collection_browser.ui.app import CollectionBrowserApp

logger = logging.getLogger(__name__)


def main():
    # Load configuration
    config = load_config()
    setup_logging(config["logging"]["level"], config["logging"]["file"])

    logger.info("Starting Collection Browser application...")

    # Create and run the application
    app = CollectionBrowserApp(config)
    app.run()


if __name__ == "__main__":
    main()
