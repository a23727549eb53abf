# 19.10.26

# External library
from rich.console import Console


# Internal utilities
from .config_json import config_manager
from M3UJson.version import __title__, __version__


# Variable
console = Console(stderr=True)


def start_message() -> None:
    """Display the application banner."""
    if not config_manager.config.get_bool('DEFAULT', 'show_message'):
        return

    console.print(f"[bold cyan]{__title__}[/bold cyan] [dim]v{__version__}[/dim] [white]- M3U playlist to JSON key extractor")
    console.print()
