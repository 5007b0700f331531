import unittest
from unittest import mock

import requests

from pym3u.dao.playlist_source.remote import RemotePlaylistSource
from pym3u.errors import RetrievalError

URL = "http://example.com/playlist.m3u"


def make_response(
    status_code: int, body: bytes = b"", reason: str = "", content_type: str = ""
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body
    if content_type:
        response.headers["Content-Type"] = content_type
        response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    return response


class TestRemotePlaylistSource(unittest.IsolatedAsyncioTestCase):
    async def test_success_returns_text(self):
        body = "#EXTINF:-1,Über TV\nhttp://example.com/u\n".encode("utf-8")
        with mock.patch(
            "requests.get",
            return_value=make_response(200, body, "OK", "audio/x-mpegurl"),
        ) as get:
            text = await RemotePlaylistSource(URL, timeout=5, user_agent="pym3u").load()

        self.assertIn("Über TV", text)
        get.assert_called_once_with(
            URL, headers={"User-Agent": "pym3u"}, timeout=5
        )

    async def test_declared_charset_is_respected(self):
        body = "#EXTINF:-1,Café\nhttp://x\n".encode("latin-1")
        with mock.patch(
            "requests.get",
            return_value=make_response(
                200, body, "OK", "text/plain; charset=ISO-8859-1"
            ),
        ):
            text = await RemotePlaylistSource(URL).load()
        self.assertIn("Café", text)

    async def test_non_success_status(self):
        with mock.patch(
            "requests.get", return_value=make_response(404, b"", "Not Found")
        ):
            with self.assertRaises(RetrievalError) as ctx:
                await RemotePlaylistSource(URL).load()
        self.assertEqual(ctx.exception.status, "Not Found")
        self.assertEqual(ctx.exception.url, URL)
        self.assertIn("Not Found", str(ctx.exception))

    async def test_missing_reason_falls_back_to_code(self):
        with mock.patch("requests.get", return_value=make_response(503)):
            with self.assertRaises(RetrievalError) as ctx:
                await RemotePlaylistSource(URL).load()
        self.assertEqual(ctx.exception.status, "503")

    async def test_transport_error(self):
        error = requests.ConnectionError("connection refused")
        with mock.patch("requests.get", side_effect=error):
            with self.assertRaises(RetrievalError) as ctx:
                await RemotePlaylistSource(URL).load()
        self.assertIs(ctx.exception.__cause__, error)
        self.assertIn("connection refused", ctx.exception.status)

    async def test_remote_urls_are_not_extension_checked(self):
        with mock.patch(
            "requests.get",
            return_value=make_response(200, b"#EXTM3U\n", "OK"),
        ):
            text = await RemotePlaylistSource(
                "http://example.com/get.php?type=m3u_plus"
            ).load()
        self.assertEqual(text, "#EXTM3U\n")
