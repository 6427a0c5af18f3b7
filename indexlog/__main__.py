"""
Entry point for the `indexlog` command-line interface.

indexlog works with index log entries: the versioned catalog records
describing a covering index, the plan and data it was built from, and
its lifecycle state.
"""


def main():
    """Main entry point for the indexlog CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
