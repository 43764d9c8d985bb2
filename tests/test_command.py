""" Tests wcurl.core.command """

import logging

import pytest

from wcurl.core.command import PER_URL_PARAMETERS, build_curl_args
from wcurl.models.config import Configuration
from wcurl.models.version import ToolVersion

TWO_URLS = ("https://example.com/a.txt", "https://example.com/b.txt")


def make_config(urls=TWO_URLS, **kwargs):
    return Configuration(urls=urls, **kwargs)


class TestVersionGates:
    """ Tests which flags each curl release receives. """

    @pytest.mark.parametrize(
        "version, parallel, max_host",
        [
            ((7, 65), False, False),
            ((7, 66), True, False),
            ((8, 15), True, False),
            ((8, 16), True, True),
            ((9, 0), True, True),
        ],
    )
    def test_parallel_flags(self, version, parallel, max_host):
        """ Parallel needs 7.66, the per-host cap needs 8.16. """
        args = build_curl_args(make_config(), ToolVersion(*version))
        assert ("--parallel" in args) is parallel
        assert ("--parallel-max-host" in args) is max_host

    @pytest.mark.parametrize("version", [(7, 66), (8, 16)])
    def test_single_url_is_never_parallel(self, version):
        """ Parallel flags are only passed for two or more URLs. """
        config = make_config(urls=("https://example.com/a.txt",))
        args = build_curl_args(config, ToolVersion(*version))
        assert "--parallel" not in args
        assert "--parallel-max-host" not in args

    @pytest.mark.parametrize(
        "version, no_clobber",
        [((7, 82), False), ((7, 83), True), ((8, 0), True)],
    )
    def test_no_clobber(self, version, no_clobber):
        """ No-clobber needs 7.83 and is set for every transfer. """
        args = build_curl_args(make_config(), ToolVersion(*version))
        expected = len(TWO_URLS) if no_clobber else 0
        assert args.count("--no-clobber") == expected


class TestTransferBlocks:
    """ Tests the per-URL layout of the argument list. """

    def test_two_urls_on_8_16(self):
        """ The full argument list for two URLs on a current curl. """
        args = build_curl_args(make_config(), ToolVersion(8, 16))
        block = list(PER_URL_PARAMETERS) + ["--no-clobber"]
        assert args == (
            ["--parallel", "--parallel-max-host", "5"]
            + block
            + ["--output", "a.txt", "https://example.com/a.txt"]
            + ["--next"]
            + block
            + ["--output", "b.txt", "https://example.com/b.txt"]
        )
        assert args.count("--parallel") == 1
        assert args.count("--parallel-max-host") == 1
        assert args.count("--next") == 1

    def test_per_url_parameters(self):
        """ Every transfer fails fast, follows redirects and retries. """
        assert PER_URL_PARAMETERS == (
            "--fail",
            "--globoff",
            "--location",
            "--proto-default",
            "https",
            "--remote-time",
            "--retry",
            "5",
        )

    def test_user_output_shared(self):
        """ A user-supplied output path is used for every URL. """
        config = make_config(output_path="out.bin")
        args = build_curl_args(config, ToolVersion(8, 0))
        assert args.count("--output") == 2
        assert [args[i + 1] for i, a in enumerate(args) if a == "--output"] == [
            "out.bin",
            "out.bin",
        ]

    def test_empty_user_output_is_kept(self):
        """ An explicitly empty output path is still the user's choice. """
        config = make_config(urls=("https://example.com/a.txt",), output_path="")
        args = build_curl_args(config, ToolVersion(8, 0))
        assert args[args.index("--output") + 1] == ""

    def test_derived_output_respects_decode_flag(self):
        """ Derived filenames are decoded unless disabled. """
        urls = ("https://example.com/my%20file.txt",)
        decoded = build_curl_args(make_config(urls=urls), ToolVersion(8, 0))
        raw = build_curl_args(
            make_config(urls=urls, decode_filename=False), ToolVersion(8, 0)
        )
        assert decoded[decoded.index("--output") + 1] == "my file.txt"
        assert raw[raw.index("--output") + 1] == "my%20file.txt"

    def test_extra_options_before_each_url(self):
        """ Extra options are repeated, in order, right before each URL. """
        config = make_config(extra_options=("-k", "-v"))
        args = build_curl_args(config, ToolVersion(7, 50))
        for url in TWO_URLS:
            position = args.index(url)
            assert args[position - 2 : position] == ["-k", "-v"]

    def test_warns_about_shared_output_without_no_clobber(self, caplog):
        """ Old curls cannot number files sharing an output path. """
        config = make_config(output_path="out.bin")
        with caplog.at_level(logging.WARNING, logger="wcurl"):
            build_curl_args(config, ToolVersion(7, 82))
        assert "out.bin" in caplog.text

        caplog.clear()
        with caplog.at_level(logging.WARNING, logger="wcurl"):
            build_curl_args(config, ToolVersion(7, 83))
        assert caplog.text == ""
