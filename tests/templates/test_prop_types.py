import logging

from app.schemas.blog import PageContext, PostsPageProps
from app.settings import settings
from app.templates.prop_types import check_prop_types


def test_silent_outside_development(monkeypatch, caplog):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    with caplog.at_level(logging.WARNING):
        result = check_prop_types({"currentPage": 1}, PageContext, "Posts")

    assert result == []
    assert caplog.records == []


def test_warns_about_missing_required_field_in_development(monkeypatch, caplog):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")

    with caplog.at_level(logging.WARNING):
        result = check_prop_types(
            {"currentPage": 1, "pageCount": 3}, PageContext, "Posts"
        )

    assert len(result) == 1
    assert "`base`" in result[0]
    assert "Failed prop type" in caplog.records[0].message


def test_reports_nested_shape_errors_without_raising(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    props = {
        "data": {"allMarkdownRemark": {"edges": [{"node": {"excerpt": "no id"}}]}},
        "pageContext": {"base": "/posts", "currentPage": 1, "pageCount": 1},
    }

    result = check_prop_types(props, PostsPageProps, "Posts")

    assert any("data.allMarkdownRemark.edges.0.node.id" in msg for msg in result)


def test_valid_props_produce_no_messages(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    props = {
        "data": {"allMarkdownRemark": {"edges": []}},
        "pageContext": {"base": "/posts", "currentPage": 1, "pageCount": 1},
    }

    assert check_prop_types(props, PostsPageProps, "Posts") == []
