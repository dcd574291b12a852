"""Allow running bloodpressure as a module: python -m bloodpressure"""

from bloodpressure.cli import app

if __name__ == "__main__":
    app()
