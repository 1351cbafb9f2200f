"""Tests for the `cargo -Vv` text parser."""

from datetime import date

import pytest
import semver

from cargolink.errors import DateError, DecodeError, ErrorKind, SemverError, TripleError, VersionKeyError
from cargolink.models.version import PlatformTriple
from cargolink.parsers.version import VersionTextParser, parse_version

REQUIRED_KEYS = ["release", "host", "libgit2", "libcurl", "os"]


def _without(text: str, key: str) -> str:
    return "\n".join(line for line in text.splitlines() if not line.startswith(f"{key}: "))


def test_parses_every_field(verbose_version_output):
    version = VersionTextParser().parse(verbose_version_output)

    assert version.release == semver.Version(1, 62, 0)
    assert version.commit_hash == "a748cf5a3e666bc2dcdf54f37adef8ef22196452"
    assert version.commit_date == date(2022, 6, 8)
    assert version.host == PlatformTriple("x86_64", "unknown", "linux", "gnu")
    assert str(version.host) == "x86_64-unknown-linux-gnu"
    assert version.libgit2 == "1.4.2 (sys:0.14.2 vendored)"
    assert version.libcurl == "7.83.1-DEV (sys:0.4.55+curl-7.83.1 vendored ssl:OpenSSL/1.1.1n)"
    assert version.os == "Arch Linux Rolling Release [64-bit]"


def test_accepts_bytes_and_crlf(verbose_version_output):
    data = verbose_version_output.replace("\n", "\r\n").encode("utf-8")

    version = parse_version(data)

    assert version.os == "Arch Linux Rolling Release [64-bit]"
    assert version.libgit2 == "1.4.2 (sys:0.14.2 vendored)"


def test_commit_lines_are_optional():
    text = "\n".join(
        [
            "release: 1.62.0",
            "host: x86_64-unknown-linux-gnu",
            "libgit2: 1.4.2",
            "libcurl: 7.83.0",
            "os: Ubuntu 22.04",
        ]
    )

    version = parse_version(text)

    assert version.commit_hash is None
    assert version.commit_date is None
    assert str(version.release) == "1.62.0"
    assert str(version.host) == "x86_64-unknown-linux-gnu"
    assert version.libgit2 == "1.4.2"
    assert version.libcurl == "7.83.0"
    assert version.os == "Ubuntu 22.04"


def test_missing_commit_hash_keeps_commit_date(verbose_version_output):
    version = parse_version(_without(verbose_version_output, "commit-hash"))

    assert version.commit_hash is None
    assert version.commit_date == date(2022, 6, 8)


@pytest.mark.parametrize("key", REQUIRED_KEYS)
def test_missing_required_key_is_reported(verbose_version_output, key):
    with pytest.raises(VersionKeyError) as excinfo:
        parse_version(_without(verbose_version_output, key))

    assert excinfo.value.key == key
    assert excinfo.value.kind is ErrorKind.VERSION
    assert f'"{key}"' in str(excinfo.value)


def test_out_of_order_keys_are_missed():
    # The scan only moves forward, so a host line placed before release is never seen.
    text = "\n".join(
        [
            "host: x86_64-unknown-linux-gnu",
            "release: 1.62.0",
            "libgit2: 1.4.2",
            "libcurl: 7.83.0",
            "os: Ubuntu 22.04",
        ]
    )

    with pytest.raises(VersionKeyError) as excinfo:
        parse_version(text)

    assert excinfo.value.key == "host"


def test_os_before_libcurl_reports_os_missing():
    text = "\n".join(
        [
            "release: 1.62.0",
            "host: x86_64-unknown-linux-gnu",
            "libgit2: 1.4.2",
            "os: Ubuntu 22.04",
            "libcurl: 7.83.0",
        ]
    )

    with pytest.raises(VersionKeyError) as excinfo:
        parse_version(text)

    assert excinfo.value.key == "os"


def test_prefix_must_match_at_line_start():
    text = "\n".join(
        [
            "release: 1.62.0",
            "host: x86_64-unknown-linux-gnu",
            "libgit2: 1.4.2",
            "libcurl: 7.83.0",
            "  os: indented",
        ]
    )

    with pytest.raises(VersionKeyError):
        parse_version(text)


def test_prerelease_release():
    text = "release: 1.64.0-nightly\nhost: aarch64-apple-darwin\nlibgit2: 1.5.0\nlibcurl: 7.84.0\nos: Mac OS 12.5.0 [64-bit]"

    version = parse_version(text)

    assert version.release.prerelease == "nightly"
    assert version.host.environment is None
    assert version.host.vendor == "apple"


def test_invalid_release_raises_semver_error(verbose_version_output):
    text = verbose_version_output.replace("release: 1.62.0", "release: 1.62")

    with pytest.raises(SemverError) as excinfo:
        parse_version(text)

    assert excinfo.value.kind is ErrorKind.SEMVER
    assert excinfo.value.value == "1.62"


def test_invalid_host_raises_triple_error(verbose_version_output):
    text = verbose_version_output.replace("host: x86_64-unknown-linux-gnu", "host: not a triple")

    with pytest.raises(TripleError) as excinfo:
        parse_version(text)

    assert excinfo.value.kind is ErrorKind.TRIPLE


def test_invalid_commit_date_raises_date_error(verbose_version_output):
    text = verbose_version_output.replace("commit-date: 2022-06-08", "commit-date: June 8th")

    with pytest.raises(DateError):
        parse_version(text)


def test_invalid_utf8_fails_before_parsing():
    with pytest.raises(DecodeError) as excinfo:
        parse_version(b"release: 1.62.0\n\xff\xfe")

    assert excinfo.value.kind is ErrorKind.UTF8
    assert isinstance(excinfo.value.unicode_error, UnicodeDecodeError)
