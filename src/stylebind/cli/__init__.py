from stylebind.cli.main import cli

__all__ = ["cli"]
