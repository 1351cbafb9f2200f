import pytest

from cargolink.parsers import (
    MetadataParser,
    UnitGraphParser,
    UnknownParserError,
    VersionTextParser,
    get_parser,
)


def test_registry_returns_parsers():
    assert isinstance(get_parser("version_text"), VersionTextParser)
    assert isinstance(get_parser("METADATA_JSON"), MetadataParser)
    assert isinstance(get_parser("unit_graph_json"), UnitGraphParser)


def test_registry_passes_supported_versions():
    parser = get_parser("metadata_json", supported_versions=[1])

    assert parser.supported_versions == frozenset({1})
    assert get_parser("unit_graph_json").supported_versions is None


def test_unknown_parser():
    with pytest.raises(UnknownParserError):
        get_parser("rustc_json")
