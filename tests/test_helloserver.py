import pytest

from gopherlab.helloserver import create_app, create_hello_app, main


@pytest.fixture
def client():
    return create_app().test_client()


def test_root_greets_gopher(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "<!DOCTYPE html>\nHello, Gopher!\n"


def test_greets_name_in_path(client):
    text = client.get("/monkeys").get_data(as_text=True)
    assert text == "<!DOCTYPE html>\nHello, monkeys!\n"


def test_nested_path_is_trimmed_of_slashes(client):
    text = client.get("/a/b").get_data(as_text=True)
    assert "Hello, a/b!" in text


def test_custom_greeting():
    text = create_app("Hi").test_client().get("/x").get_data(as_text=True)
    assert text.endswith("Hi, x!\n")


def test_name_is_html_escaped(client):
    text = client.get("/a&b").get_data(as_text=True)
    assert "a&amp;b" in text
    assert "a&b" not in text


def test_version_page(client):
    resp = client.get("/version")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True).startswith("<!DOCTYPE html>\n<pre>\n")
    assert resp.mimetype == "text/html"


def test_hello_app_replies():
    client = create_hello_app().test_client()
    assert client.get("/hello").get_data(as_text=True) == "Hello from the Go app\n"
    assert client.get("/other").status_code == 404


def test_main_rejects_arguments():
    with pytest.raises(SystemExit) as exc:
        main(["extra"])
    assert exc.value.code == 2