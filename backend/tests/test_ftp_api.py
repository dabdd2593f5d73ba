"""
FTP login endpoints: /api/ftp/{website_id}[/{id}]
"""
from services.ftp_service import FTPService
from services.results import OperationResult


def test_list(client, ftp_login):
    res = client.get(f"/api/ftp/{ftp_login.website_id}")

    assert res.status_code == 200
    records = res.json()["records"]
    assert [record["id"] for record in records] == [ftp_login.id]
    assert records[0]["path"] == "/var/www/html"


def test_details(client, ftp_login):
    res = client.get(f"/api/ftp/{ftp_login.website_id}/{ftp_login.id}")
    assert res.status_code == 200
    assert res.json()["record"]["hostname"] == "ftp.example.com"


def test_details_missing(client, website):
    res = client.get(f"/api/ftp/{website.id}/999")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "FTP login credentials not found"}


def test_add(client, website):
    res = client.post(f"/api/ftp/{website.id}", data={
        "type": "ftp",
        "hostname": "ftp.example.com",
        "username": "upload",
        "password": "hunter2",
        "path": "/public_html",
    })

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "FTP login has been added."
    assert body["record"]["website_id"] == website.id
    assert body["record"]["path"] == "/public_html"


def test_add_requires_type(client, website):
    res = client.post(f"/api/ftp/{website.id}", data={"hostname": "ftp.example.com"})
    assert res.status_code == 400
    assert res.json()["errors"] == {"type": ["FTP type is required."]}


def test_add_with_empty_body(client, website):
    res = client.post(f"/api/ftp/{website.id}")
    assert res.status_code == 400
    assert res.json()["errors"] == {"type": ["FTP type is required."]}


def test_update_via_method_override_header(client, ftp_login):
    url = f"/api/ftp/{ftp_login.website_id}/{ftp_login.id}"
    res = client.post(url, data={"username": "renamed"}, headers={"X-HTTP-Method-Override": "PUT"})

    assert res.status_code == 200
    assert res.json()["record"]["username"] == "renamed"
    assert res.json()["record"]["password"] == "s3cret"


def test_patch_behaves_like_put(client, ftp_login):
    url = f"/api/ftp/{ftp_login.website_id}/{ftp_login.id}"
    res = client.patch(url, json={"type": "ftps"})
    assert res.status_code == 200
    assert res.json()["record"]["type"] == "ftps"


def test_delete_via_method_override_param(client, ftp_login):
    url = f"/api/ftp/{ftp_login.website_id}/{ftp_login.id}"
    res = client.post(f"{url}?_method=DELETE")

    assert res.status_code == 204
    assert client.get(url).status_code == 404


def test_delete_unknown_website(client, ftp_login):
    res = client.delete(f"/api/ftp/404/{ftp_login.id}")
    assert res.status_code == 404
    assert res.json()["message"] == "Website not found"


def test_delete_other_websites_record(client, ftp_login, other_website):
    res = client.delete(f"/api/ftp/{other_website.id}/{ftp_login.id}")
    assert res.status_code == 404
    assert client.get(f"/api/ftp/{ftp_login.website_id}/{ftp_login.id}").status_code == 200


def test_storage_error_returns_500(client, website, monkeypatch):
    monkeypatch.setattr(FTPService, "list", lambda self, website_id: OperationResult.storage_error("database is locked"))

    res = client.get(f"/api/ftp/{website.id}")

    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "database is locked"}
