import io
import os
import tempfile
import unittest
from unittest import mock

from rich.console import Console

from pym3u import main as entry
from pym3u.services.catalog import CatalogService

PLAYLIST = """#EXTM3U
#EXTINF:-1 group-title="Music",Hits HD
http://example.com/hits
"""


class TestMain(unittest.TestCase):
    def setUp(self):
        self.output = io.StringIO()
        patcher = mock.patch.object(
            entry, "Console", return_value=Console(file=self.output, width=120)
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        for name in ("load_dotenv", "configure_logging"):
            patcher = mock.patch.object(entry, name)
            setattr(self, name, patcher.start())
            self.addCleanup(patcher.stop)

    def test_renders_catalog(self):
        catalog = CatalogService().build(PLAYLIST)
        console = Console(file=self.output, width=120)
        entry.render_catalog(console, catalog)
        text = self.output.getvalue()
        self.assertIn("All Channels", text)
        self.assertIn("Music", text)
        self.assertIn("1 channels loaded", text)

    def test_local_file_argument(self):
        handle, path = tempfile.mkstemp(suffix=".m3u8")
        with os.fdopen(handle, "w", encoding="utf-8") as fh:
            fh.write(PLAYLIST)
        self.addCleanup(os.remove, path)

        self.assertEqual(entry.main([path]), 0)
        text = self.output.getvalue()
        self.assertIn("music", text)
        self.assertIn("1 channels loaded", text)

    def test_format_error_exit_code(self):
        self.assertEqual(entry.main(["channels.txt"]), 1)
        self.assertIn("valid M3U", self.output.getvalue())

    def test_missing_source(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                entry.main([])

    def test_env_source(self):
        with mock.patch.dict(
            os.environ, {"PYM3U_PLAYLIST_URL": "http://example.com/list.m3u"}
        ):
            with mock.patch.object(
                CatalogService, "load_from_url", new_callable=mock.AsyncMock
            ) as load_from_url:
                load_from_url.return_value = CatalogService().build(PLAYLIST)
                self.assertEqual(entry.main([]), 0)
        load_from_url.assert_called_once()
        self.assertEqual(load_from_url.call_args.args[0], "http://example.com/list.m3u")

    def test_configuration_happens_in_main(self):
        entry.main(["channels.txt"])
        self.load_dotenv.assert_called_once_with()
        self.configure_logging.assert_called_once_with()


class TestConfigureLogging(unittest.TestCase):
    def test_log_file_from_environment(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "run.log")
            with mock.patch.dict(
                os.environ, {"PYM3U_LOG_FILE": log_file, "PYM3U_LOG_LEVEL": "debug"}
            ):
                with mock.patch("logging.basicConfig") as basic_config:
                    entry.configure_logging()
        kwargs = basic_config.call_args.kwargs
        self.assertEqual(kwargs["filename"], log_file)
        self.assertEqual(kwargs["level"], "DEBUG")
        self.assertEqual(kwargs["filemode"], "w")
