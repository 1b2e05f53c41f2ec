import logging

LOGGER = logging.getLogger(__name__)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(fmt="%(levelname)s: %(message)s"))

LOGGER.addHandler(_handler)


def set_verbosity(verbose: int) -> None:
    """Map the number of ``-v`` flags to a log level: one flag enables
    ``INFO``, two or more enable ``DEBUG``, none leaves only errors.

    """
    if verbose > 0:
        LOGGER.setLevel((3 - min(verbose, 2)) * 10)
    else:
        LOGGER.setLevel("ERROR")
