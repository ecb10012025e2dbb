'''
Logging setup for the rpnexpr package.
'''
import logging
import sys


FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEFMT = '%H:%M:%S'


def setup_logging(level=logging.WARNING):
    '''
    Send the 'rpnexpr' logger's records at level and up to stderr.

    stdout is where results go. Safe to call more than once.
    '''
    logger = logging.getLogger('rpnexpr')
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATEFMT))
    logger.addHandler(handler)
