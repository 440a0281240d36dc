from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent
