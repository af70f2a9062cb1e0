"""Allow ``python -m datetime_transformer``."""

from .cli import app

if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
