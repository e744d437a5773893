"""
Logger factory shared by every qframe component.

Each class builds its own named logger with ``get_logger(f"{__name__}.{cls}")`` so that
resolution and conversion steps can be traced per component. Handlers are attached once
per logger name; repeated calls only adjust the level.
"""

import logging

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a configured logger.

    Parameters
    ----------
    name : str
        Logger name, usually ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, log at DEBUG level; otherwise only warnings and above are emitted.

    Returns
    -------
    logging.Logger
        Logger with a single stream handler.
    """
    logger = logging.getLogger(name)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        # let pytest's caplog and host applications see the records too
        logger.propagate = True

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
