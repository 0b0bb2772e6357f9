"""Display boundary adapters."""

from resrobot_departures.adapters.display.board_formatter import BoardFormatter
from resrobot_departures.adapters.display.console_renderer import ConsoleBoardRenderer
from resrobot_departures.adapters.display.state_publisher import DisplayStatePublisher

__all__ = ["BoardFormatter", "ConsoleBoardRenderer", "DisplayStatePublisher"]
