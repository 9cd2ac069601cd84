import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler

def logger():
    return logging.getLogger("simple_outcome")

def configure_logger(debug: bool, rich: bool = True):
    class BackTickHighlighter(RegexHighlighter):
        highlights = [r"`(?P<bold>[^`]*)`"]

    if rich:
        FORMAT = "%(message)s"
        handler: logging.Handler = RichHandler(
            show_path=debug, highlighter=BackTickHighlighter(), log_time_format="[%X]")
        handler.setFormatter(logging.Formatter(FORMAT))
    else:
        handler = logging.StreamHandler(sys.stdout)

    log = logger()
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers = [handler]
    log.propagate = False
