"""Tests for placeholder substitution in plugin title templates."""

from datetime import datetime

from app.models.content import Term
from app.services.templating import TemplateContext, build_context, format_date, replace_vars


class TestReplaceVars:
    def test_percent_placeholders(self):
        context = TemplateContext(title="Fleet Wraps", sitename="AdWrap", sep="-")
        assert replace_vars("%title% %sep% %sitename%", context) == "Fleet Wraps - AdWrap"

    def test_unknown_placeholder_passes_through(self):
        context = TemplateContext(title="Fleet Wraps")
        assert replace_vars("%title% %pagenumber%", context) == "Fleet Wraps %pagenumber%"

    def test_double_percent_with_aliases(self):
        context = TemplateContext(author="Dana", category="Trucks")
        result = replace_vars(
            "%%name%% on %%primary_category%%",
            context,
            prefix="%%",
            suffix="%%",
            names={"name": "author", "primary_category": "category"},
        )
        assert result == "Dana on Trucks"

    def test_longest_name_wins_without_suffix(self):
        context = TemplateContext(title="Wraps", modified="May 1, 2024", date="Jan 1, 2024")
        result = replace_vars(
            "#post_modified_date / #post_date",
            context,
            prefix="#",
            suffix="",
            names={"post_date": "date", "post_modified_date": "modified"},
        )
        assert result == "May 1, 2024 / Jan 1, 2024"

    def test_empty_template(self):
        assert replace_vars("", TemplateContext()) == ""


class TestBuildContext:
    def test_context_from_item(self, make_item):
        item = make_item(
            excerpt="<p>Short <b>summary</b></p>",
            taxonomy_terms=[
                Term(taxonomy="post_tag", slug="vinyl", name="Vinyl"),
                Term(taxonomy="category", slug="trucks", name="Trucks"),
                Term(taxonomy="category", slug="vans", name="Vans"),
            ],
        )
        context = build_context(item, "AdWrap", "Wraps")
        assert context.title == "Fleet Wraps"
        assert context.sitename == "AdWrap"
        assert context.excerpt == "Short summary"
        assert context.category == "Trucks"
        assert context.tag == "Vinyl"
        assert context.author == "Dana"
        assert context.date == "January 5, 2024"

    def test_missing_terms_are_empty(self, item):
        context = build_context(item, "AdWrap")
        assert context.category == ""
        assert context.tag == ""


def test_format_date():
    assert format_date(datetime(2024, 3, 9)) == "March 9, 2024"
    assert format_date(None) == ""
