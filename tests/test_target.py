"""Tests for Target parsing and validation."""

import pytest
from plainhttp import HostTooLongError, InvalidAddressError, MissingHostError, Target, TargetError
from plainhttp.target import HOST_NAME_MAX


class TestFromUrl:
    """Test Target.from_url."""

    def test_full_url(self):
        """Test host, port, path and query are all picked up."""
        target = Target.from_url("http://example.com:8080/get?a=1&b=%2Fx")
        assert target.host == "example.com"
        assert target.port == 8080
        assert target.path == "/get"
        assert target.query == "a=1&b=%2Fx"
        assert target.scheme == "http"

    def test_no_port(self):
        """Test a URL without port leaves the port unset."""
        assert Target.from_url("http://example.com/").port is None

    def test_empty_path_and_no_query(self):
        """Test a bare host gives an empty path and no query."""
        target = Target.from_url("http://example.com")
        assert target.path == ""
        assert target.query is None

    def test_empty_query_is_kept(self):
        """Test a trailing '?' gives an empty, not missing, query."""
        assert Target.from_url("http://example.com/p?").query == ""

    def test_path_stays_percent_encoded(self):
        """Test percent escapes in the path are not decoded."""
        assert Target.from_url("http://example.com/a%20b").path == "/a%20b"

    def test_missing_host(self):
        """Test a URL without host is rejected."""
        with pytest.raises(MissingHostError):
            Target.from_url("http:///path")

    def test_unsupported_scheme(self):
        """Test anything but http:// is rejected."""
        with pytest.raises(InvalidAddressError, match="scheme"):
            Target.from_url("https://example.com/")

    def test_relative_address(self):
        """Test a string without scheme is rejected."""
        with pytest.raises(InvalidAddressError):
            Target.from_url("example.com/get")

    def test_bad_port(self):
        """Test a non-numeric port is rejected."""
        with pytest.raises(InvalidAddressError):
            Target.from_url("http://example.com:http/")


class TestFromHostPath:
    """Test Target.from_host_path."""

    def test_splits_query(self):
        """Test the query is split off at the first '?'."""
        target = Target.from_host_path("example.com", "/test?param=%2Fnicoco&q=a?b")
        assert target.path == "/test"
        assert target.query == "param=%2Fnicoco&q=a?b"

    def test_no_query(self):
        """Test a path without '?' has no query."""
        target = Target.from_host_path("example.com", "/test")
        assert target.path == "/test"
        assert target.query is None

    def test_empty_host(self):
        """Test an empty host is rejected."""
        with pytest.raises(MissingHostError):
            Target.from_host_path("", "/")


class TestValidation:
    """Test construction-time invariants."""

    def test_host_at_limit(self):
        """Test a host of exactly the maximum length is accepted."""
        assert Target(host="a" * HOST_NAME_MAX).host == "a" * HOST_NAME_MAX

    def test_host_too_long(self):
        """Test a host over the maximum length is rejected."""
        with pytest.raises(HostTooLongError):
            Target(host="a" * (HOST_NAME_MAX + 1))

    def test_port_out_of_range(self):
        """Test ports outside 1..65535 are rejected."""
        with pytest.raises(InvalidAddressError):
            Target(host="example.com", port=70000)

    def test_url_round_trip(self):
        """Test url renders the target back."""
        assert Target(host="h", port=81, path="", query="x=1").url == "http://h:81/?x=1"
        assert Target(host="h", path="/p").url == "http://h/p"


class TestIPv6Hosts:
    """Test bracketed IPv6 literals."""

    def test_from_url(self):
        """Test the brackets are stripped for connecting but kept for the wire."""
        target = Target.from_url("http://[::1]:8080/x")
        assert target.host == "::1"
        assert target.port == 8080
        assert target.authority_host == "[::1]"

    def test_url_parses_back(self):
        """Test url keeps the brackets so it parses to the same target."""
        target = Target.from_url("http://[::1]:8080/x?a=1")
        assert target.url == "http://[::1]:8080/x?a=1"
        assert Target.from_url(target.url) == target

    def test_url_without_port(self):
        """Test brackets are written without a port too."""
        assert Target(host="fe80::1").url == "http://[fe80::1]/"

    def test_plain_host_unchanged(self):
        """Test names and IPv4 addresses are not bracketed."""
        assert Target(host="127.0.0.1").authority_host == "127.0.0.1"
        assert Target(host="example.com").authority_host == "example.com"


class TestMalformedHosts:
    """Test hosts that would break the URL or the Host line are refused."""

    @pytest.mark.parametrize(
        "host",
        [
            "exa mple.com",
            "a\r\nX-Evil: 1",
            "a\nb",
            "a\tb",
            "a\x00b",
            "a\x7fb",
            "a/b",
            "a?b",
            "a#b",
            "user@host",
        ],
    )
    def test_rejected(self, host):
        """Test whitespace, control characters and URL delimiters fail."""
        with pytest.raises(InvalidAddressError, match="malformed host"):
            Target(host=host)

    def test_space_in_url(self):
        """Test a space inside the URL host fails."""
        with pytest.raises(InvalidAddressError):
            Target.from_url("http://exa mple.com/")

    def test_header_injection_from_host_path(self):
        """Test CR/LF in a host passed to from_host_path fails."""
        with pytest.raises(TargetError):
            Target.from_host_path("a\r\nX-Evil: 1", "/")

    def test_valid_hosts(self):
        """Test ordinary hosts still pass."""
        for host in ("example.com", "my-host_1.local", "10.0.0.1", "::1"):
            assert Target(host=host).host == host
