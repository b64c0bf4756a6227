#!/usr/bin/env python3
"""
Main entry point for the Lear limerick service.
"""

import sys
import logging
import argparse
from dataclasses import replace

import uvicorn

from lear.api.server import create_app
from lear.config.config_manager import ConfigManager
from lear.llm.base_llm import LLMError
from lear.utils.logging_config import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Lear - architectural limerick service')
    parser.add_argument('--config', '-c',
                        help='Path to a YAML configuration file (default: bundled config)')
    parser.add_argument('--host',
                        help='Interface to bind (overrides config)')
    parser.add_argument('--port', '-p', type=int,
                        help='Port to listen on (overrides config)')
    parser.add_argument('--log-level',
                        help='Logging level, e.g. DEBUG or INFO (overrides config)')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    config = ConfigManager(args.config).build_service_config()

    server_overrides = {}
    if args.host:
        server_overrides['host'] = args.host
    if args.port:
        server_overrides['port'] = args.port
    if server_overrides:
        config = replace(config, server=replace(config.server, **server_overrides))
    if args.log_level:
        config = replace(config, logging=replace(config.logging, level=args.log_level.upper()))

    configure_logging(config.logging.level, config.logging.format, config.logging.file)
    logger = logging.getLogger("lear")

    try:
        app = create_app(config)
    except (LLMError, ValueError) as e:
        logger.error(f"Could not start service: {e}")
        sys.exit(1)

    logger.info(f"Server running on port {config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
