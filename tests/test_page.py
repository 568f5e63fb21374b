import pytest

from neurondeck.scrapers.page import parse_html

HTML = """
<div id="row" class="t_row c_normal">
  <input class="cid" value="4041">
  <img id="card_image_1" src="get_image.action?cid=4041">
  <span class="card_name">  ブラック・マジシャン  </span>
  <div class="box_card_attribute"><span>ignored</span><span>闇属性</span></div>
</div>
"""
BASE_URL = "https://www.db.yugioh-card.com/yugiohdb/member_deck.action?dno=16"


class TestSoupElement:
    @pytest.mark.asyncio
    async def test_text_is_untrimmed(self) -> None:
        page = parse_html(HTML, BASE_URL)

        name = await page.select_one(".card_name")

        assert name is not None
        assert await name.text() == "  ブラック・マジシャン  "

    @pytest.mark.asyncio
    async def test_src_resolves_against_base_url(self) -> None:
        page = parse_html(HTML, BASE_URL)

        image = await page.select_one('img[id^="card_image"]')

        assert image is not None
        assert await image.prop("src") == (
            "https://www.db.yugioh-card.com/yugiohdb/get_image.action?cid=4041"
        )

    @pytest.mark.asyncio
    async def test_value_and_missing_props(self) -> None:
        page = parse_html(HTML, BASE_URL)

        cid = await page.select_one("input.cid")

        assert cid is not None
        assert await cid.prop("value") == "4041"
        assert await cid.prop("placeholder") == ""

    @pytest.mark.asyncio
    async def test_last_child_selector(self) -> None:
        page = parse_html(HTML, BASE_URL)

        attribute = await page.select_one(".box_card_attribute span:last-child")

        assert attribute is not None
        assert await attribute.text() == "闇属性"

    @pytest.mark.asyncio
    async def test_scoped_queries(self) -> None:
        page = parse_html(HTML, BASE_URL)

        row = await page.select_one("#row")
        assert row is not None

        assert len(await row.select_all("span")) == 3
        assert await row.select_one(".missing") is None
