from pathlib import Path

__version__ = "1.0.0"

PROJECT_ROOT = Path(__file__).parents[2]
