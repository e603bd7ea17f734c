"""Tests for the arc42 template reference."""

from arc42.core.reference import (
    BUNDLED_REFERENCE,
    SOURCE_REPO,
    load_reference,
    parse_version_properties,
    reference_config,
    reference_string,
)


def test_parse_version_properties_skips_comments_and_blanks():
    props = parse_version_properties("# comment\n\nrevnumber = 9.0-EN\nrevdate=July 2025\nnot a pair\n")
    assert props == {"revnumber": "9.0-EN", "revdate": "July 2025"}


class TestLoadReference:
    def test_bundled_when_no_dir_configured(self):
        assert load_reference() is BUNDLED_REFERENCE

    def test_bundled_when_version_file_missing(self, tmp_path):
        assert load_reference(tmp_path) is BUNDLED_REFERENCE

    def test_reads_checkout(self, tmp_path):
        (tmp_path / "EN").mkdir()
        (tmp_path / "EN" / "version.properties").write_text(
            "revnumber=9.1-EN\nrevdate=January 2026\ncommit=abc1234\n", encoding="utf-8"
        )
        ref = load_reference(tmp_path)
        assert ref.version == "9.1-EN"
        assert ref.date == "January 2026"
        assert ref.commit_sha == "abc1234"
        assert ref.checkout_available is True

    def test_env_var_points_at_checkout(self, tmp_path, monkeypatch):
        (tmp_path / "EN").mkdir()
        (tmp_path / "EN" / "version.properties").write_text("revnumber=8.2-EN\nrevdate=Jan 2023\n", encoding="utf-8")
        monkeypatch.setenv("ARC42_TEMPLATE_DIR", str(tmp_path))
        ref = load_reference()
        assert ref.version == "8.2-EN"
        assert ref.commit_sha == "unknown"

    def test_incomplete_properties_fall_back(self, tmp_path):
        (tmp_path / "EN").mkdir()
        (tmp_path / "EN" / "version.properties").write_text("revnumber=9.1-EN\n", encoding="utf-8")
        assert load_reference(tmp_path) is BUNDLED_REFERENCE


def test_reference_string():
    assert reference_string(BUNDLED_REFERENCE) == "arc42 Template v9.0-EN (July 2025)"


def test_reference_config_keys():
    config = reference_config(BUNDLED_REFERENCE)
    assert config["arc42_template_version"] == "9.0-EN"
    assert config["arc42_template_source"] == SOURCE_REPO
    assert set(config) == {
        "arc42_template_version",
        "arc42_template_date",
        "arc42_template_source",
        "arc42_template_commit",
    }

