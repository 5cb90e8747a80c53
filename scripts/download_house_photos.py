"""
Download House Photos

Pages through the houses API and saves every house photo to the output
directory (current directory by default).

Usage:
    python scripts/download_house_photos.py --workers 20 --output-dir photos
"""
import sys
from pathlib import Path

# Add parent directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.housephotos.pipelines.coordinator import main


if __name__ == "__main__":
    sys.exit(main())
