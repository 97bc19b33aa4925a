"""Tests for the public showcase feed."""

import random

import pytest

from services.showcase import ShowcaseService, determine_category


class TestDetermineCategory:
    @pytest.mark.parametrize(
        "title, category",
        [
            ("New Software Release", "Technology"),
            ("The AI revolution", "Technology"),
            ("Market outlook for 2025", "Business"),
            ("A research breakthrough", "Science"),
            ("Wellness habits", "Health"),
            ("Gardening tips", "General"),
            ("", "General"),
            (None, "General"),
        ],
    )
    def test_keywords(self, title, category):
        assert determine_category(title) == category

    def test_first_match_wins(self):
        assert determine_category("Tech business news") == "Technology"

    def test_substring_match(self):
        # "said" contains "ai"
        assert determine_category("She said yes") == "Technology"


class TestShowcaseService:
    @pytest.fixture
    def service(self, db):
        return ShowcaseService(rng=random.Random(1234))

    def test_feed_item_shape(self, service, make_user, make_summary):
        make_summary(make_user(), title="Health matters", summary_content="s" * 200)

        page = service.get_showcase()

        assert page.current_page == 0
        assert page.total_pages == 1
        item = page.summaries[0]
        assert isinstance(item.id, str)
        assert item.title == "Health matters"
        assert len(item.snippet) == 150 and item.snippet.endswith("...")
        assert item.key_points == ["Point one", "Point two"]
        assert item.category == "Health"
        assert 80 <= item.popularity <= 99
        assert item.stats.original_words == 100
        assert item.stats.summary_words == 20
        assert item.stats.compression_ratio == 80

    def test_no_owner_information(self, service, make_user, make_summary):
        make_summary(make_user("secretowner"))
        dumped = service.get_showcase().model_dump_json(by_alias=True)
        assert "secretowner" not in dumped
        assert "userId" not in dumped
        assert "originalContent" not in dumped

    def test_pool_limited_to_three_pages(self, service, make_user, make_summary):
        user = make_user()
        for i in range(12):
            make_summary(user, title=f"Story {i}")

        page = service.get_showcase(page=0, size=3)
        assert page.total_pages == 3
        assert [s.title for s in page.summaries] == ["Story 11", "Story 10", "Story 9"]
        assert service.get_showcase(page=3, size=3).summaries == []

    def test_category_filter(self, service, make_user, make_summary):
        user = make_user()
        make_summary(user, title="Science weekly")
        make_summary(user, title="Cooking")

        page = service.get_showcase(category="science")

        assert [s.title for s in page.summaries] == ["Science weekly"]
        assert page.summaries[0].category == "Science"

    def test_empty(self, service):
        page = service.get_showcase()
        assert page.summaries == []
        assert page.total_pages == 0
