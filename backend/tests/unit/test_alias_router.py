"""Unit tests for alias patterns and the AliasRouter."""

import pytest

from cmsstore.application.services import AliasRouter, EntityStore, alias_to_pattern
from cmsstore.domain.entities import EntityStatus, Page, Site
from cmsstore.domain.queries import PageQuery, SiteQuery


# ── alias_to_pattern ────────────────────────────────────────────────


def test_num_token_becomes_anchored_digit_group():
    pattern = alias_to_pattern("/blog/:num")
    assert pattern.pattern == "^/blog/([0-9]+)$"
    assert pattern.match("/blog/42")
    assert not pattern.match("/blog/abc")
    assert not pattern.match("/blog/42/extra")


def test_alias_without_tokens_has_no_pattern():
    assert alias_to_pattern("/about") is None


def test_longer_tokens_are_not_split_by_shorter_ones():
    assert alias_to_pattern("/v/:numeric").pattern == "^/v/([0-9-.]+)$"
    assert alias_to_pattern("/v/:number").pattern == "^/v/([0-9]+)$"


@pytest.mark.parametrize(
    "alias, path, matches",
    [
        ("/user/:any", "/user/jane-doe", True),
        ("/user/:any", "/user/jane/doe", False),
        ("/files/:all", "/files/a/b/c.txt", True),
        ("/tag/:string", "/tag/Python", True),
        ("/tag/:string", "/tag/py3", False),
        ("/price/:numeric", "/price/-1.50", True),
        ("/slug/:alpha", "/slug/my_post-2", True),
        ("/slug/:alpha", "/slug/my post", False),
    ],
)
def test_token_fragments(alias, path, matches):
    assert bool(alias_to_pattern(alias).match(path)) is matches


def test_literal_text_is_escaped():
    pattern = alias_to_pattern("/a.b/:num")
    assert pattern.match("/a.b/1")
    assert not pattern.match("/axb/1")


def test_regex_syntax_in_alias_text_is_not_interpreted():
    pattern = alias_to_pattern("/(en|fr)/:num")
    assert pattern.match("/(en|fr)/1")
    assert not pattern.match("/en/1")


# ── AliasRouter ─────────────────────────────────────────────────────


@pytest.fixture
def pages(make_gateway) -> EntityStore[Page]:
    return EntityStore(Page, PageQuery, make_gateway())


@pytest.fixture
def sites(make_gateway) -> EntityStore[Site]:
    return EntityStore(Site, SiteQuery, make_gateway())


@pytest.fixture
def router(pages, sites) -> AliasRouter:
    return AliasRouter(pages, sites)


async def _page(pages, site_id: str, alias: str) -> Page:
    page = Page()
    page.site_id = site_id
    page.alias = alias
    return await pages.create(page)


@pytest.mark.asyncio
async def test_exact_alias_is_found_first(router, pages):
    exact = await _page(pages, "s1", "/blog/latest")
    await _page(pages, "s1", "/blog/:any")
    assert (await router.find_page_by_alias("s1", "/blog/latest")).id == exact.id


@pytest.mark.asyncio
async def test_alias_without_leading_slash_is_found(router, pages):
    page = await _page(pages, "s1", "/about")
    assert (await router.find_page_by_alias("s1", "about")).id == page.id


@pytest.mark.asyncio
async def test_pattern_alias_matches(router, pages):
    page = await _page(pages, "s1", "/blog/:num")
    assert (await router.find_page_by_alias("s1", "/blog/42")).id == page.id
    assert await router.find_page_by_alias("s1", "/blog/abc") is None


@pytest.mark.asyncio
async def test_pages_of_other_sites_are_ignored(router, pages):
    await _page(pages, "s2", "/blog/:num")
    assert await router.find_page_by_alias("s1", "/blog/42") is None


@pytest.mark.asyncio
async def test_overlapping_patterns_resolve_to_lowest_page_id(router, pages):
    first = await _page(pages, "s1", "/item/:num")
    second = await _page(pages, "s1", "/item/:any")
    expected = min(first.id, second.id)

    for _ in range(5):
        assert (await router.find_page_by_alias("s1", "/item/7")).id == expected


async def _site(sites, domains: list[str], status=EntityStatus.ACTIVE) -> Site:
    site = Site()
    site.domain_names = domains
    site.status = status
    return await sites.create(site)


@pytest.mark.asyncio
async def test_site_resolution_prefers_longest_endpoint(router, sites):
    main = await _site(sites, ["example.com"])
    blog = await _site(sites, ["example.com/blog"])

    site, endpoint = await router.find_site_by_domain_and_path("example.com", "/blog/post")
    assert site.id == blog.id
    assert endpoint == "example.com/blog"

    site, endpoint = await router.find_site_by_domain_and_path("example.com", "/shop")
    assert site.id == main.id
    assert endpoint == "example.com"


@pytest.mark.asyncio
async def test_site_resolution_ignores_inactive_sites(router, sites):
    await _site(sites, ["draft.example.com"], status=EntityStatus.DRAFT)
    assert await router.find_site_by_domain_and_path("draft.example.com", "/") == (None, "")
