import unittest
from datetime import datetime, timezone

import context  # noqa: F401
from helpers import make_context, post

from langfeed.collect import collect_entries, group_entries_by_lang, resolve_languages
from langfeed.i18n import I18n
from langfeed.models import ContentFile

BASE = "https://example.com"


class TestCollectEntries(unittest.TestCase):
    def test_only_valid_published_posts_are_collected(self):
        files = [
            post("Kept"),
            post("Invalid", is_valid=False),
            post("Draft", is_draft=True),
            post("Unpublished", is_published=False),
            post("Page", is_post_template=False),
        ]
        entries = collect_entries(files, BASE)
        assert [e.title for e in entries] == ["Kept"]

    def test_entries_are_sorted_newest_first_and_stable(self):
        files = [
            post("Old", date="2023-01-01"),
            post("Undated A", date=None),
            post("New", date="2024-03-01"),
            post("Same day 1", date="2023-06-01"),
            post("Broken", date="yesterday-ish nonsense"),
            post("Same day 2", date="2023-06-01"),
            post("Undated B", date=""),
        ]
        entries = collect_entries(files, BASE)
        assert [e.title for e in entries] == [
            "New",
            "Same day 1",
            "Same day 2",
            "Old",
            "Undated A",
            "Broken",
            "Undated B",
        ]

    def test_link_and_guid_are_resolved_against_site_url(self):
        (entry,) = collect_entries([post("Hello", canonical="/en/hello/")], BASE)
        assert entry.link == "https://example.com/en/hello/"
        assert entry.guid == entry.link

    def test_updated_defaults_to_date(self):
        (entry,) = collect_entries([post(date="2024-05-01")], BASE)
        assert entry.updated == datetime(2024, 5, 1, tzinfo=timezone.utc)

        (entry,) = collect_entries([post(date="2024-05-01", updated="2024-05-03")], BASE)
        assert entry.updated == datetime(2024, 5, 3, tzinfo=timezone.utc)

    def test_unparseable_updated_is_absent(self):
        (entry,) = collect_entries([post(updated="garbage value")], BASE)
        assert entry.updated is None
        assert entry.date is not None

    def test_tags_must_be_a_list(self):
        (entry,) = collect_entries([post(tags="python")], BASE)
        assert entry.categories == []

        (entry,) = collect_entries([post(tags=["python", "rss"])], BASE)
        assert entry.categories == ["python", "rss"]

    def test_non_string_fields_are_coerced(self):
        (entry,) = collect_entries([post(description=3.5, canonical=7)], BASE)
        assert entry.description == "3.5"
        assert entry.link == "https://example.com/7"

        (entry,) = collect_entries([post(description=None)], BASE)
        assert entry.description is None

    def test_from_mapping_reads_host_keys(self):
        file = ContentFile.from_mapping(
            {
                "title": "T",
                "isValid": True,
                "isDraft": True,
                "isPublished": True,
                "isPostTemplate": True,
            }
        )
        assert file.is_draft
        assert not file.is_post


class TestLanguagePartitioning(unittest.TestCase):
    def test_entries_without_language_go_to_default(self):
        files = [post("A", lang="tr"), post("B", lang=None), post("C", lang="")]
        groups = group_entries_by_lang(collect_entries(files, BASE), "en")
        assert sorted(groups) == ["en", "tr"]
        assert [e.title for e in groups["en"]] == ["B", "C"]

    def test_grouping_keeps_sort_order(self):
        files = [
            post("Older", date="2024-01-01"),
            post("Newer", date="2024-02-01"),
        ]
        groups = group_entries_by_lang(collect_entries(files, BASE), "en")
        assert [e.title for e in groups["en"]] == ["Newer", "Older"]

    def test_resolve_languages(self):
        assert resolve_languages(make_context(supported=("en", "tr")).i18n) == ["en", "tr"]
        assert resolve_languages(I18n(default="tr", supported=[])) == ["tr"]


if __name__ == "__main__":
    unittest.main()
