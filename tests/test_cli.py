import argparse
import contextlib
import io
import os
import unittest
from unittest.mock import patch

from duelchess import cli
from duelchess.config import Settings, load_settings
from duelchess.errors import PeerDisconnected


class ParseEndpointTests(unittest.TestCase):
    def test_port_only_selects_host_mode(self):
        self.assertEqual(cli.parse_endpoint("9000"), cli.Endpoint(None, 9000))

    def test_host_and_port_select_remote_mode(self):
        self.assertEqual(cli.parse_endpoint("localhost:9000"), cli.Endpoint("localhost", 9000))
        self.assertEqual(cli.parse_endpoint("10.0.0.7:1234"), cli.Endpoint("10.0.0.7", 1234))

    def test_bad_values(self):
        for value in ["", "abc", "host:", ":9000", "host:70000", "0"]:
            with self.assertRaises(argparse.ArgumentTypeError, msg=value):
                cli.parse_endpoint(value)

    def test_parser_exits_with_usage_error(self):
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.build_parser().parse_args(["-m", "nope"])
        self.assertEqual(ctx.exception.code, 2)


class MainDispatchTests(unittest.TestCase):
    def setUp(self):
        patcher = patch("duelchess.cli.configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_local_mode_by_default(self):
        with patch("duelchess.cli.play_local", return_value=0) as play_local:
            self.assertEqual(cli.main([]), 0)
        play_local.assert_called_once()

    def test_host_mode(self):
        with patch("duelchess.cli.peers.host", return_value=0) as host:
            self.assertEqual(cli.main(["-m", "9000", "--no-color"]), 0)
        port, console, settings = host.call_args.args
        self.assertEqual(port, 9000)
        self.assertFalse(console.color)
        self.assertFalse(settings.color)

    def test_remote_mode(self):
        with patch("duelchess.cli.peers.remote", return_value=0) as remote:
            self.assertEqual(cli.main(["--multiplayer", "example.org:9000"]), 0)
        self.assertEqual(remote.call_args.args[:2], ("example.org", 9000))

    def test_network_failures_exit_nonzero(self):
        for exc in (ConnectionRefusedError(111, "Connection refused"), PeerDisconnected(2)):
            with patch("duelchess.cli.peers.remote", side_effect=exc), \
                    contextlib.redirect_stderr(io.StringIO()) as err:
                self.assertEqual(cli.main(["-m", "localhost:9000"]), 1)
            self.assertIn("duelchess:", err.getvalue())

    def test_bind_failure_exits_nonzero(self):
        with patch("duelchess.cli.peers.host", side_effect=OSError(98, "Address already in use")), \
                contextlib.redirect_stderr(io.StringIO()):
            self.assertEqual(cli.main(["-m", "9000"]), 1)


class SettingsTests(unittest.TestCase):
    def test_flags_override_settings(self):
        args = cli.build_parser().parse_args(["--no-clear", "--log-level", "debug", "--log-file", "x.log"])
        s = cli.resolve_settings(args, Settings())
        self.assertFalse(s.clear_screen)
        self.assertTrue(s.color)
        self.assertEqual(s.log_level, "DEBUG")
        self.assertEqual(s.log_file, "x.log")

    def test_yaml_values_then_env_then_defaults(self):
        env = {"DUELCHESS_LISTEN_ADDRESS": "127.0.0.1"}
        with patch.dict(os.environ, env, clear=True):
            s = load_settings({"DUELCHESS_SAVE_FILE": "club.pgn", "DUELCHESS_COLOR": "false"})
        self.assertEqual(s.save_file, "club.pgn")
        self.assertFalse(s.color)
        self.assertEqual(s.listen_address, "127.0.0.1")
        self.assertTrue(s.clear_screen)
        self.assertEqual(s.log_level, "WARNING")


if __name__ == "__main__":
    unittest.main()
