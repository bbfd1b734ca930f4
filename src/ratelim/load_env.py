from dotenv import load_dotenv

load_dotenv("./.env")

import os


environment = {
    "env": os.environ.get("ENV"),
    "log_level": os.environ.get("LOG_LEVEL", "ERROR").upper(),
    "username": os.environ.get("MQTT_USERNAME"),
    "password": os.environ.get("MQTT_PASSWORD"),
    "host": os.environ.get("MQTT_HOST"),
    "port": int(os.environ.get("MQTT_PORT", 8883)),
    "channel": os.environ.get("MQTT_CHANNEL"),
    "publish_interval": float(os.environ.get("PUBLISH_INTERVAL", 1.0)),
}


def get(key):
    return environment[key]
