"""Unit tests for search and output options."""

from dataclasses import fields

import pytest

from minigrep.options import OutputOptions, SearchOptions


@pytest.mark.unit
class TestSearchOptions:
    """Test SearchOptions."""

    def test_defaults(self):
        options = SearchOptions()
        assert not options.case_insensitive
        assert not options.use_regex
        assert options.max_workers is None
        assert options.encoding == "utf-8"

    @pytest.mark.parametrize("workers", [0, -1])
    def test_non_positive_workers_rejected(self, workers):
        with pytest.raises(ValueError, match="max_workers must be positive"):
            SearchOptions(max_workers=workers)

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValueError, match="Unknown encoding"):
            SearchOptions(encoding="definitely-not-a-codec")

    def test_create_updated_returns_new_instance(self):
        original = SearchOptions()
        updated = original.create_updated(use_regex=True, max_workers=2)

        assert updated is not original
        assert updated.use_regex
        assert updated.max_workers == 2
        assert not original.use_regex

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            SearchOptions().create_updated(max_workers=0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            SearchOptions().use_regex = True  # type: ignore[misc]

    def test_option_names(self):
        assert SearchOptions.option_names() == {"case_insensitive", "use_regex", "max_workers", "encoding"}

    def test_update_from_mapping_ignores_unknown_keys(self):
        original = SearchOptions()
        updated = original.update_from_mapping({"use_regex": True, "colour": "red"})

        assert updated.use_regex
        assert not original.use_regex

    def test_update_from_mapping_without_known_keys_returns_self(self):
        original = SearchOptions()
        assert original.update_from_mapping({"unrelated": 1}) is original


@pytest.mark.unit
class TestOutputOptions:
    """Test OutputOptions."""

    def test_defaults(self):
        options = OutputOptions()
        assert options.color
        assert options.show_line_numbers
        assert not options.quiet
        assert not options.show_count
        assert options.line_number_width == 4
        assert options.exit_policy == "auto"
        assert options.sort_files
        assert not options.rich

    def test_width_must_be_positive(self):
        with pytest.raises(ValueError, match="line_number_width"):
            OutputOptions(line_number_width=0)

    def test_exit_policy_choices(self):
        for policy in ("auto", "discovery", "display"):
            assert OutputOptions(exit_policy=policy).exit_policy == policy
        with pytest.raises(ValueError, match="exit_policy"):
            OutputOptions(exit_policy="never")  # type: ignore[arg-type]

    def test_every_field_documents_itself(self):
        for options_class in (SearchOptions, OutputOptions):
            for option_field in fields(options_class):
                assert option_field.metadata.get("help"), option_field.name
