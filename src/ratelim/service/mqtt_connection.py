import logging

import paho.mqtt.client as mqtt

from ratelim import load_env

logger = logging.getLogger(__name__)


def create_connection(username, password, host, port=8883, keepalive=15):
    def on_connect(client, userdata, flags, reason_code, properties):
        logger.critical("Mqtt client connected to: %s", host)

    def on_disconnect(client, userdata, flags, reason_code, properties):
        logger.critical("Disconnected from: %s (%s)", host, reason_code)

    client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
    client.username_pw_set(username, password)
    client.tls_set()

    client.on_connect = on_connect
    client.on_disconnect = on_disconnect

    client.loop_start()
    logger.debug("Connecting to %s:%s", host, port)
    client.connect(host, port=port, keepalive=keepalive)
    return client


def connect_from_env():
    return create_connection(
        load_env.get("username"),
        load_env.get("password"),
        load_env.get("host"),
        port=load_env.get("port"),
    )
