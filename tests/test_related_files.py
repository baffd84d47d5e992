"""Unit tests for alias expansion and related file resolution."""

from pathlib import Path

import pytest

from sitedeps.core.constants import ALIAS_GROUPS
from sitedeps.services.alias_expander import expand_aliases
from sitedeps.services.related_files import RelatedFileResolver
from tests.fixtures.fake_registry import FakeResource


class TestExpandAliases:
    """Test extension alias groups."""

    def test_sass_group(self):
        assert expand_aliases({".scss"}) == {".scss", ".sass"}

    def test_erb_group(self):
        assert expand_aliases({".haml"}) == {".erb", ".haml", ".slim"}

    def test_unrelated_extensions_pass_through(self):
        assert expand_aliases({".js", ".html"}) == {".js", ".html"}

    def test_mixed_input(self):
        assert expand_aliases([".sass", ".js", ".slim"]) == {
            ".scss", ".sass", ".js", ".erb", ".haml", ".slim",
        }

    def test_empty_input(self):
        assert expand_aliases(set()) == frozenset()

    @pytest.mark.parametrize(
        "extensions",
        [{".scss"}, {".erb", ".css"}, {".md"}, {".sass", ".haml"}, set()],
    )
    def test_idempotent(self, extensions):
        once = expand_aliases(extensions)
        assert expand_aliases(once) == once

    def test_groups_are_disjoint(self):
        first, second = ALIAS_GROUPS
        assert first.isdisjoint(second)

    def test_custom_groups(self):
        groups = (frozenset({".jsx", ".tsx"}),)
        assert expand_aliases({".jsx"}, groups) == {".jsx", ".tsx"}
        assert expand_aliases({".scss"}, groups) == {".scss"}


class TestRelatedFileResolver:
    """Test find_related invalidation semantics."""

    @pytest.fixture
    def resolver(self, template_registry):
        return RelatedFileResolver.for_registry(template_registry)

    def test_no_changes_returns_empty(self, resolver):
        candidates = [FakeResource.backed_by("/site/theme.sass")]

        assert resolver.find_related([], candidates) == []

    def test_sass_alias_marks_related(self, resolver):
        changed = {Path("/site/stylesheets/style.scss")}
        candidates = [FakeResource.backed_by("/site/stylesheets/theme.sass")]

        assert resolver.find_related(changed, candidates) == [
            Path("/site/stylesheets/theme.sass")
        ]

    def test_changed_file_itself_is_excluded(self, resolver):
        changed = {Path("/site/stylesheets/style.scss")}
        candidates = [
            FakeResource.backed_by("/site/stylesheets/style.scss"),
            FakeResource.backed_by("/site/stylesheets/theme.sass"),
        ]

        assert resolver.find_related(changed, candidates) == [
            Path("/site/stylesheets/theme.sass")
        ]

    def test_template_alias_group(self, resolver):
        changed = {Path("/site/partials/_nav.html.haml")}
        candidates = [
            FakeResource.backed_by("/site/index.html.erb"),
            FakeResource.backed_by("/site/about.html.slim"),
            FakeResource.backed_by("/site/app.js"),
        ]

        assert resolver.find_related(changed, candidates) == [
            Path("/site/index.html.erb"),
            Path("/site/about.html.slim"),
        ]

    def test_residual_extension_overlap(self, resolver):
        changed = {Path("/site/feed.xml.builder")}
        candidates = [
            FakeResource.backed_by("/site/sitemap.xml"),
            FakeResource.backed_by("/site/robots.txt"),
        ]

        # ".builder" is not a template extension here, so nothing is shared
        assert resolver.find_related(changed, candidates) == []

    def test_unrelated_candidates_excluded(self, resolver):
        changed = {Path("/site/about.html.erb")}
        candidates = [
            FakeResource.backed_by("/site/javascripts/app.js"),
            FakeResource.backed_by("/site/images/logo.png"),
        ]

        assert resolver.find_related(changed, candidates) == []

    def test_candidates_without_source_file_excluded(self, resolver):
        changed = {Path("/site/index.html.erb")}
        candidates = [
            FakeResource(path="proxy.html", source_file=None),
            FakeResource.backed_by("/site/contact.html.erb"),
        ]

        assert resolver.find_related(changed, candidates) == [
            Path("/site/contact.html.erb")
        ]

    def test_preserves_candidate_order(self, resolver):
        changed = {Path("/site/layouts/layout.erb")}
        names = ["/site/z.html.erb", "/site/a.html.haml", "/site/m.html.slim"]
        candidates = [FakeResource.backed_by(name) for name in names]

        assert resolver.find_related(changed, candidates) == [Path(n) for n in names]

    def test_accepts_string_paths(self, resolver):
        changed = ["/site/style.scss"]
        candidates = [
            FakeResource.backed_by("/site/style.scss"),
            FakeResource.backed_by("/site/print.sass"),
        ]

        assert resolver.find_related(changed, candidates) == [Path("/site/print.sass")]

    def test_shares_memo_across_calls(self, resolver, template_registry):
        changed = {Path("/site/index.html.erb")}
        candidates = [FakeResource.backed_by("/site/blog/index.html.erb")]

        resolver.find_related(changed, candidates)
        queries = len(template_registry.queries)
        resolver.find_related(changed, candidates)

        assert len(template_registry.queries) == queries
        assert resolver.memo.stats.hits > 0

    def test_same_basename_in_other_directory_is_related(self, resolver):
        changed = {Path("/site/en/index.html.erb")}
        candidates = [FakeResource.backed_by("/site/de/index.html.erb")]

        assert resolver.find_related(changed, candidates) == [
            Path("/site/de/index.html.erb")
        ]
