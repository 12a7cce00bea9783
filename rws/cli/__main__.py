"""Module entry point for `python -m rws.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from rws.cli import cli

    cli()
