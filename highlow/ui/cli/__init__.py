"""High-Low command line interface.

- HighLowCLI / main: console session and click entry point
- CLIRenderer: display text
- CardGameTracker: console delegate
"""

from .cli_game import HighLowCLI, main
from .render import CLIRenderer
from .tracker import CardGameTracker

__all__ = [
    'HighLowCLI',
    'main',
    'CLIRenderer',
    'CardGameTracker'
]
