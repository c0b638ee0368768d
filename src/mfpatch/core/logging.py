import logging, sys

def setup_logging(level: str = "INFO", stream=None) -> None:
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(lvl, int):
        lvl = logging.INFO
    handler = logging.StreamHandler(stream or sys.stdout)
    fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s - %(message)s')
    handler.setFormatter(fmt)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(lvl)
