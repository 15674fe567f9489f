import logging


LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def init_logging(verbosity=0):
    levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    level = levels[min(verbosity or 0, len(levels) - 1)]

    logging.basicConfig(level=level, format=LOG_FORMAT)
