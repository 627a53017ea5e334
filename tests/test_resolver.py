"""Unit tests for tag resolution against Babel's locale data."""

import pytest

from langnames.locales.constants import INVALID_TAG_MESSAGE
from langnames.locales.resolver import (
    InvalidLanguageTagError,
    LanguageTagRecord,
    lookup_display_names,
    parse_tag,
    resolve_tag,
    resolve_tags,
)


INVALID_TAGS = [
    "zz-ZZ-bogus-tag",
    "xx-US",
    "not-a-real-tag",
    "",
    "und",
    "root",
    "xx",
    "en_US",
    " en",
    "en.UTF-8",
    "123",
]


@pytest.mark.parametrize(
    "tag, english, localized",
    [
        ("en", "English", "English"),
        ("fr", "French", "français"),
        ("de", "German", "Deutsch"),
        ("pt-br", "Portuguese (Brazil)", "português (Brasil)"),
    ],
)
def test_lookup_display_names(tag, english, localized):
    assert lookup_display_names(tag) == (english, localized)


def test_resolution_is_deterministic():
    assert resolve_tag("ja") == resolve_tag("ja")
    assert lookup_display_names("pt-br") == lookup_display_names("pt-br")


@pytest.mark.parametrize("upper, lower", [("EN", "en"), ("PT-BR", "pt-br"), ("Fr", "fr")])
def test_tag_case_is_not_significant(upper, lower):
    assert lookup_display_names(upper) == lookup_display_names(lower)


def test_record_keeps_tag_as_given():
    record = resolve_tag("PT-BR")
    assert record.tag == "PT-BR"
    assert record.english_name == "Portuguese (Brazil)"


def test_valid_record_has_names_and_no_error():
    record = resolve_tag("fr")
    assert record.ok
    assert record.english_name and record.localized_name
    assert record.error_message is None


@pytest.mark.parametrize("tag", INVALID_TAGS)
def test_invalid_tag_yields_error_record(tag):
    record = resolve_tag(tag)
    assert record == LanguageTagRecord(tag, error_message=INVALID_TAG_MESSAGE)
    assert not record.ok
    assert record.english_name is None
    assert record.localized_name is None


@pytest.mark.parametrize("tag", INVALID_TAGS)
def test_lookup_raises_for_invalid_tag(tag):
    with pytest.raises(InvalidLanguageTagError) as exc_info:
        lookup_display_names(tag)
    assert exc_info.value.tag == tag


def test_invalid_tag_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_tag("not-a-real-tag")


def test_parse_tag_normalizes_subtags():
    assert parse_tag("pt-br") == ("pt", "BR", None, None)
    assert parse_tag("ZH-hant-tw") == ("zh", "TW", "Hant", None)


def test_resolve_tags_preserves_order():
    records = list(resolve_tags(["fr", "bogus-tag-here", "en"]))
    assert [r.tag for r in records] == ["fr", "bogus-tag-here", "en"]
    assert [r.ok for r in records] == [True, False, True]


@pytest.mark.parametrize(
    "tag, english, localized",
    [
        ("fr-US", "French (United States)", "français (États-Unis)"),
        ("en-AQ", "English (Antarctica)", "English (Antarctica)"),
        ("FR-us", "French (United States)", "français (États-Unis)"),
    ],
)
def test_known_subtags_without_locale_data_are_named(tag, english, localized):
    record = resolve_tag(tag)
    assert record == LanguageTagRecord(tag, english, localized)
    assert record.ok


@pytest.mark.parametrize("tag", ["und-US", "root-FR"])
def test_root_language_with_region_is_invalid(tag):
    assert not resolve_tag(tag).ok
