"""uipoll Command Line Interface.

Usage:
    uipoll --help
    uipoll find-image assets/start.png --timeout 5 --click
    uipoll find-text "start game" --region 0,800,1920,280
    uipoll main-ui --marker assets/menu.png
"""

from .main import main

__all__ = ["main"]
