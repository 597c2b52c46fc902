"""Theme loader for slide font configurations."""
import json
from pathlib import Path
from typing import List

from .config import FontConfig

THEMES_DIR = Path(__file__).parent / "themes"


def get_theme(theme: str = "default") -> FontConfig:
    """
    Load the font configuration for the specified theme.

    Args:
        theme: Theme name (default, compact, etc.)

    Returns:
        FontConfig built from the theme file

    Raises:
        FileNotFoundError: If theme file doesn't exist
        ValueError: If theme name is invalid or the file is not a JSON object
    """
    # Only plain names, no path separators
    if not theme.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid theme name: {theme}")

    theme_path = THEMES_DIR / f"{theme}.json"
    if not theme_path.exists():
        raise FileNotFoundError(
            f"Theme '{theme}' not found. Available themes: {list_available_themes()}"
        )

    with open(theme_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Theme '{theme}' must contain a JSON object")

    return FontConfig.from_dict(data)


def list_available_themes() -> List[str]:
    """
    List all available themes.

    Returns:
        Sorted list of theme names
    """
    if not THEMES_DIR.exists():
        return []

    return sorted(f.stem for f in THEMES_DIR.glob("*.json") if f.is_file())


def validate_theme(theme: str) -> bool:
    """
    Check if a theme exists.

    Args:
        theme: Theme name to validate

    Returns:
        True if theme exists, False otherwise
    """
    try:
        get_theme(theme)
        return True
    except (FileNotFoundError, ValueError):
        return False
