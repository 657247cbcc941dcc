"""End-to-end tests of the CmsStore over SQLite."""

import pytest
from sqlalchemy import inspect

from cmsstore.application.services import CmsStore
from cmsstore.domain.entities import Block, EntityKind, EntityStatus, Menu, MenuItem, Page, Site
from cmsstore.domain.queries import BlockQuery, MenuItemQuery, PageQuery, SiteQuery


@pytest.mark.asyncio
async def test_auto_migrate_creates_every_enabled_table(engine, cms_store):
    async with engine.connect() as conn:
        names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert set(names) == {
        "cms_block",
        "cms_page",
        "cms_site",
        "cms_template",
        "cms_menu",
        "cms_menu_item",
        "cms_translation",
        "cms_version",
    }


@pytest.mark.asyncio
async def test_draft_page_activated_then_found_by_id(cms_store: CmsStore):
    page = Page()
    page.site_id = "s1"
    page.title = "Draft"
    await cms_store.pages.create(page)

    page.status = EntityStatus.ACTIVE
    await cms_store.pages.update(page)

    found = await cms_store.pages.find_by_id(page.id)
    assert found is not None
    assert found.id == page.id
    assert found.is_active
    assert found.title == "Draft"
    assert found.data_changed() == {}


@pytest.mark.asyncio
async def test_versioning_deduplicates_identical_content(cms_store: CmsStore):
    page = await cms_store.pages.create(Page())
    page.title = "Second"
    await cms_store.pages.update(page)
    page.title = "Second"
    await cms_store.pages.update(page)

    versions = await cms_store.versioning_list(EntityKind.PAGE, page.id)
    assert len(versions) == 2
    assert versions[0].created_at > versions[1].created_at


@pytest.mark.asyncio
async def test_menus_are_not_versioned(cms_store: CmsStore):
    menu = await cms_store.menus.create(Menu())
    assert await cms_store.versioning_list(EntityKind.MENU, menu.id) == []


@pytest.mark.asyncio
async def test_soft_deleted_rows_are_hidden_unless_requested(cms_store: CmsStore):
    kept = await cms_store.sites.create(Site())
    gone = await cms_store.sites.create(Site())
    await cms_store.sites.soft_delete_by_id(gone.id)

    visible = await cms_store.sites.list(SiteQuery())
    assert [site.id for site in visible] == [kept.id]
    assert await cms_store.sites.count(SiteQuery()) == 1
    assert await cms_store.sites.count(SiteQuery(soft_deleted_included=True)) == 2
    assert await cms_store.sites.find_by_id(gone.id) is None


@pytest.mark.asyncio
async def test_hard_delete_removes_row(cms_store: CmsStore):
    template = await cms_store.templates.create(cms_store.templates.entity_class())
    assert await cms_store.templates.delete_by_id(template.id)
    assert await cms_store.templates.count(cms_store.templates.new_query(soft_deleted_included=True)) == 0


@pytest.mark.asyncio
async def test_filters_sort_and_paging(cms_store: CmsStore):
    for sequence, status in [(3, "active"), (1, "draft"), (2, "active")]:
        block = Block()
        block.page_id = "p1"
        block.sequence = sequence
        block.status = status
        block.name = f"Block {sequence}"
        await cms_store.blocks.create(block)

    ascending = await cms_store.blocks.list(BlockQuery(page_id="p1", order_by="sequence", sort_order="asc"))
    assert [block.sequence for block in ascending] == [1, 2, 3]

    active = await cms_store.blocks.list(
        BlockQuery(status_in=["active"], order_by="sequence", sort_order="desc", limit=1)
    )
    assert [block.sequence for block in active] == [3]

    second_page = await cms_store.blocks.list(
        BlockQuery(order_by="sequence", sort_order="asc", limit=1, offset=1)
    )
    assert [block.sequence for block in second_page] == [2]

    assert await cms_store.blocks.count(BlockQuery(name_like="BLOCK")) == 3
    assert await cms_store.blocks.count(BlockQuery(sequence=2)) == 1


@pytest.mark.asyncio
async def test_like_filter_treats_wildcards_literally(cms_store: CmsStore):
    plain = Page()
    plain.alias = "/blog/post"
    await cms_store.pages.create(plain)
    percent = Page()
    percent.alias = "/100%-off"
    await cms_store.pages.create(percent)

    found = await cms_store.pages.list(PageQuery(alias_like="%"))
    assert [page.id for page in found] == [percent.id]


@pytest.mark.asyncio
async def test_selected_columns_only(cms_store: CmsStore):
    page = Page()
    page.alias = "/about"
    await cms_store.pages.create(page)

    [partial] = await cms_store.pages.list(PageQuery(columns=["id", "alias"]))
    assert partial.data() == {"id": page.id, "alias": "/about"}


@pytest.mark.asyncio
async def test_menu_items_by_menu(cms_store: CmsStore):
    menu = await cms_store.menus.create(Menu())
    for sequence in (2, 1):
        item = MenuItem()
        item.menu_id = menu.id
        item.sequence = sequence
        await cms_store.menu_items.create(item)

    items = await cms_store.menu_items.list(
        MenuItemQuery(menu_id=menu.id, order_by="sequence", sort_order="asc")
    )
    assert [item.sequence for item in items] == [1, 2]


@pytest.mark.asyncio
async def test_alias_and_site_resolution(cms_store: CmsStore):
    site = Site()
    site.status = EntityStatus.ACTIVE
    site.domain_names = ["example.com", "example.com/shop"]
    await cms_store.sites.create(site)

    page = Page()
    page.site_id = site.id
    page.alias = "/product/:num"
    await cms_store.pages.create(page)

    resolved, endpoint = await cms_store.router.find_site_by_domain_and_path("example.com", "/shop/cart")
    assert resolved.id == site.id
    assert endpoint == "example.com/shop"

    found = await cms_store.router.find_page_by_alias(site.id, "/product/15")
    assert found.id == page.id
    assert await cms_store.router.find_page_by_alias(site.id, "/product/abc") is None


@pytest.mark.asyncio
async def test_site_domain_name_filter(cms_store: CmsStore):
    site = Site()
    site.domain_names = ["example.com", "www.example.com"]
    await cms_store.sites.create(site)
    other = Site()
    other.domain_names = ["example.com.au"]
    await cms_store.sites.create(other)

    found = await cms_store.sites.list(SiteQuery(domain_name="example.com"))
    assert [s.id for s in found] == [site.id]
    assert (await cms_store.sites.find_by_domain_name("www.example.com")).id == site.id
    assert (await cms_store.sites.find_by_domain_name("example.com.au")).id == other.id


@pytest.mark.asyncio
async def test_update_of_deleted_row_is_not_versioned(cms_store: CmsStore):
    page = await cms_store.pages.create(Page())
    await cms_store.pages.delete(page)

    page.title = "Gone"
    await cms_store.pages.update(page)

    versions = await cms_store.versioning_list(EntityKind.PAGE, page.id)
    assert len(versions) == 1
