import unittest
from unittest import mock

from ratelim.service import mqtt_connection


class CreateConnectionTest(unittest.TestCase):
    def setUp(self):
        """Call before every test case."""
        patcher = mock.patch.object(mqtt_connection.mqtt, "Client")
        self.client_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.client = self.client_class.return_value

    def test_connects_with_tls(self):
        client = mqtt_connection.create_connection("user", "secret", "mqtt.example.net")
        self.assertIs(client, self.client)
        self.client_class.assert_called_once_with(
            mqtt_connection.mqtt.CallbackAPIVersion.VERSION2
        )
        self.client.username_pw_set.assert_called_once_with("user", "secret")
        self.client.tls_set.assert_called_once_with()
        self.client.loop_start.assert_called_once_with()
        self.client.connect.assert_called_once_with(
            "mqtt.example.net", port=8883, keepalive=15
        )

    def test_logs_connection_events(self):
        client = mqtt_connection.create_connection("user", "secret", "mqtt.example.net")
        with self.assertLogs(mqtt_connection.logger, level="CRITICAL") as logs:
            client.on_connect(client, None, {}, 0, None)
            client.on_disconnect(client, None, {}, 7, None)
        self.assertIn("connected to: mqtt.example.net", logs.output[0])
        self.assertIn("Disconnected from: mqtt.example.net (7)", logs.output[1])

    def test_connect_from_env(self):
        environment = {
            "username": "u",
            "password": "p",
            "host": "broker.example.net",
            "port": 1883,
        }
        with mock.patch.dict(mqtt_connection.load_env.environment, environment):
            mqtt_connection.connect_from_env()
        self.client.connect.assert_called_once_with(
            "broker.example.net", port=1883, keepalive=15
        )


if __name__ == "__main__":
    unittest.main()
