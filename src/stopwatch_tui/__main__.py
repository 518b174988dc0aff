import argparse
import logging

from pydantic import ValidationError
from textual.logging import TextualHandler

from . import __version__
from .UI import UI
from .config import StopwatchConfig
from .timer_state import TimerState

log = logging.getLogger(__name__)

def setupLogging(level: str) -> None:
    # Routed to the Textual devtools console so records never draw over the UI.
    logging.basicConfig(level=level, handlers=[TextualHandler()])

def parseArgs(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog='stopwatch-tui', 
        description='Terminal stopwatch with lap splits.', 
    )
    parser.add_argument(
        '--refresh-interval', type=float, default=None, 
        help='Display refresh period in seconds (default 0.01).', 
    )
    parser.add_argument('--title', default=None)
    parser.add_argument('--log-level', default=None)
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {__version__}', 
    )
    return parser, parser.parse_args(argv)

def main(argv: list[str] | None = None) -> None:
    parser, args = parseArgs(argv)
    try:
        config = StopwatchConfig.fromEnv(
            refresh_interval=args.refresh_interval,
            title=args.title,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))
    setupLogging(config.log_level)
    log.info('config: %s', config)
    UI(TimerState(), config).run()

if __name__ == '__main__':
    main()
