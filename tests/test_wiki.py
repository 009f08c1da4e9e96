import os
import stat

import pytest

from gopherlab.wiki import Page, create_app, create_greeting_app, load_page


@pytest.fixture
def client(tmp_path):
    return create_app(tmp_path).test_client()


def test_save_and_load_round_trip(tmp_path):
    Page(title="TestPage", body=b"This is a sample Page.").save(tmp_path)
    page = load_page(tmp_path, "TestPage")
    assert page == Page(title="TestPage", body=b"This is a sample Page.")
    assert (tmp_path / "TestPage.txt").read_bytes() == b"This is a sample Page."


def test_save_uses_owner_only_permissions(tmp_path):
    Page(title="Private", body=b"x").save(tmp_path)
    mode = stat.S_IMODE(os.stat(tmp_path / "Private.txt").st_mode)
    assert mode == 0o600


def test_save_overwrites_existing_page(tmp_path):
    Page(title="P", body=b"first version").save(tmp_path)
    Page(title="P", body=b"2").save(tmp_path)
    assert load_page(tmp_path, "P").body == b"2"


def test_load_missing_page_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_page(tmp_path, "Nope")


def test_view_missing_redirects_to_edit(client):
    response = client.get("/view/ANewPage")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/edit/ANewPage")


def test_edit_missing_shows_empty_form(client):
    response = client.get("/edit/ANewPage")
    assert response.status_code == 200
    text = response.get_data(as_text=True)
    assert "Editing ANewPage" in text
    assert 'action="/save/ANewPage"' in text


def test_save_stores_body_and_redirects(tmp_path, client):
    response = client.post("/save/test", data={"body": "Hello world"})
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/view/test")
    assert load_page(tmp_path, "test").body == b"Hello world"


def test_view_existing_page_escapes_body(tmp_path, client):
    Page(title="test", body=b"a <b> c").save(tmp_path)
    response = client.get("/view/test")
    assert response.status_code == 200
    text = response.get_data(as_text=True)
    assert "<h1>test</h1>" in text
    assert "&lt;b&gt;" in text
    assert "<b>" not in text


def test_edit_existing_page_prefills_body(tmp_path, client):
    Page(title="Front", body=b"existing text").save(tmp_path)
    text = client.get("/edit/Front").get_data(as_text=True)
    assert "existing text" in text


@pytest.mark.parametrize(
    "path", ["/view/", "/view/bad-title", "/edit/a/b", "/save/x.y", "/view/..%2Fetc"]
)
def test_invalid_paths_are_not_found(client, path):
    assert client.get(path).status_code == 404


def test_invalid_save_writes_nothing(tmp_path, client):
    response = client.post("/save/bad-title", data={"body": "x"})
    assert response.status_code == 404
    assert list(tmp_path.iterdir()) == []


def test_custom_templates(tmp_path):
    templates = tmp_path / "tmpl"
    templates.mkdir()
    (templates / "edit.html").write_text("EDIT {{ title }}", encoding="utf-8")
    (templates / "view.html").write_text("VIEW {{ title }}={{ body }}", encoding="utf-8")
    data = tmp_path / "data"
    data.mkdir()
    Page(title="Home", body=b"content").save(data)
    client = create_app(data, templates).test_client()
    assert client.get("/view/Home").get_data(as_text=True) == "VIEW Home=content"
    assert client.get("/edit/Other").get_data(as_text=True) == "EDIT Other"


def test_missing_template_file_fails_at_creation(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_app(tmp_path, tmp_path / "absent")


def test_greeting_app():
    client = create_greeting_app().test_client()
    response = client.get("/monkeys")
    assert response.get_data(as_text=True) == "Hi there, I love monkeys!"


def test_greeting_app_root():
    client = create_greeting_app().test_client()
    assert client.get("/").get_data(as_text=True) == "Hi there, I love !"