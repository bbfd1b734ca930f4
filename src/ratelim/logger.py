import logging

from ratelim import load_env

FORMAT = "%(asctime)s.%(msecs)d %(name)s %(levelname)s: %(message)s"


def init(name="ratelim"):
    """Configures root logging once from the environment and returns ``name``'s logger."""
    env = load_env.get("env")
    level = logging.DEBUG if env == "development" else load_env.get("log_level")
    logging.basicConfig(level=level, format=FORMAT, datefmt="%H:%M:%S")
    return logging.getLogger(name)
