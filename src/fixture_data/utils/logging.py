import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command line use.

    Only warnings are shown unless ``verbose`` is set, in which case the
    fixture_data debug messages (directory scans, entry counts) are shown too.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
