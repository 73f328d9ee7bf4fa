from __future__ import annotations

import pytest

from config import ConfigError, load_config, parse_config
from models import SiteConfig


def test_load_config_reads_all_sites(write_config, valid_config_yaml):
    config = load_config(write_config(valid_config_yaml))

    assert config.webhook == "https://discord.com/api/webhooks/123/abc"
    assert config.websites == (
        SiteConfig(
            url="https://shop.example.com/product/1",
            name="Example Shop",
            interval=1000,
            no_stock_indicator="Out of stock",
        ),
        SiteConfig(
            url="https://other.example.com/item",
            name="Other Store",
            interval=5000,
            no_stock_indicator='<span class="sold-out">',
        ),
    )


def test_missing_interval_is_rejected(write_config):
    path = write_config(
        """
webhook: https://hooks.example/1
websites:
  - URL: https://shop.example.com
    name: Shop
    no_stock_indicator: Out of stock
"""
    )

    with pytest.raises(ConfigError, match="interval"):
        load_config(path)


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(ConfigError, match="Unable to open"):
        load_config(tmp_path / "absent.yaml")


def test_invalid_yaml_is_rejected(write_config):
    path = write_config("webhook: [unclosed\nwebsites: {")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


def test_empty_file_is_rejected(write_config):
    with pytest.raises(ConfigError, match="mapping"):
        load_config(write_config(""))


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"websites": []}, "webhook"),
        ({"webhook": "", "websites": []}, "webhook"),
        ({"webhook": "https://hooks.example/1"}, "websites"),
        ({"webhook": "https://hooks.example/1", "websites": []}, "non-empty list"),
        ({"webhook": "https://hooks.example/1", "websites": {"URL": "x"}}, "non-empty list"),
        ({"webhook": "https://hooks.example/1", "websites": ["https://a.example"]}, "mapping"),
    ],
)
def test_top_level_structure_is_validated(raw, message):
    with pytest.raises(ConfigError, match=message):
        parse_config(raw)


def _site(**overrides):
    entry = {
        "URL": "https://shop.example.com",
        "name": "Shop",
        "interval": 1000,
        "no_stock_indicator": "Out of stock",
    }
    entry.update(overrides)
    return {"webhook": "https://hooks.example/1", "websites": [entry]}


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"interval": 0}, "positive"),
        ({"interval": -5}, "positive"),
        ({"interval": "1000"}, "integer"),
        ({"interval": 1.5}, "integer"),
        ({"interval": True}, "integer"),
        ({"no_stock_indicator": ""}, "no_stock_indicator"),
        ({"URL": None}, "URL"),
        ({"name": 42}, "name"),
    ],
)
def test_site_fields_are_validated(overrides, message):
    with pytest.raises(ConfigError, match=message):
        parse_config(_site(**overrides))


def test_error_names_the_offending_entry():
    raw = _site()
    raw["websites"].append({"URL": "https://b.example", "name": "B", "interval": 10})

    with pytest.raises(ConfigError, match=r"websites\[1\].*no_stock_indicator"):
        parse_config(raw)


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize("indicator", [" ", "\u00a0", "\t"])
def test_whitespace_indicator_is_accepted(indicator):
    config = parse_config(_site(no_stock_indicator=indicator))

    assert config.websites[0].no_stock_indicator == indicator


@pytest.mark.parametrize("key", ["URL", "name"])
def test_whitespace_only_url_or_name_is_rejected(key):
    with pytest.raises(ConfigError, match=key):
        parse_config(_site(**{key: "   "}))
