'''
    File name: trumpduel/utils.py
    Date created: 10/07/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import logging


def setup_logging(level=logging.INFO):
    """
    Prepares the logging.
    """

    logger = logging.getLogger('trumpduel')
    if logger.hasHandlers():
        return

    logger.setLevel(level)
    shandle = logging.StreamHandler()
    shandle.setFormatter(
        logging.Formatter(
            '[%(levelname)s:%(process)d %(module)s:%(lineno)d %(asctime)s] '
            '%(message)s'))
    logger.addHandler(shandle)
    logger.propagate = False
