import logging

from rich.console import Console
from rich.logging import RichHandler


def _setup_root_logger() -> logging.Logger:
    """Attach a rich handler that writes to stderr, so the card on stdout stays untouched."""
    _logger = logging.getLogger("xmascard")
    _handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        show_level=True,
        markup=False,
    )
    _logger.addHandler(_handler)
    _logger.propagate = False
    return _logger


logger = _setup_root_logger()
