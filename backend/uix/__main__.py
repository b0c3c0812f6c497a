"""Command-line entry point: ``python -m uix``."""

import argparse

from uix.main import run


def main():
    parser = argparse.ArgumentParser(description="Console web server")
    parser.add_argument("--config", "-c", help="Path to a JSON config file with a \"ui\" section")
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")
    args = parser.parse_args()
    run(config_path=args.config, debug=args.debug)


if __name__ == "__main__":
    main()
