"""
Website endpoints: parent records for credentials
"""
from models import DatabaseLogin, FTPLogin


def test_list_websites(client, website, other_website):
    res = client.get("/api/websites")

    assert res.status_code == 200
    names = [record["name"] for record in res.json()["records"]]
    assert names == ["Example", "Other"]


def test_get_website(client, website):
    res = client.get(f"/api/websites/{website.id}")
    assert res.status_code == 200
    assert res.json()["record"]["domain"] == "example.com"


def test_get_missing_website(client):
    res = client.get("/api/websites/999")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Website not found"}


def test_add_website(client):
    res = client.post("/api/websites", data={"name": "Shop", "domain": "shop.example.com"})

    assert res.status_code == 201
    record = res.json()["record"]
    assert record["name"] == "Shop"

    # The new website can own credentials straight away
    res = client.post(f"/api/ftp/{record['id']}", data={"type": "sftp"})
    assert res.status_code == 201


def test_add_website_requires_name(client):
    res = client.post("/api/websites", data={"domain": "d" * 256})

    assert res.status_code == 400
    assert res.json()["errors"] == {
        "name": ["Website name is required."],
        "domain": ["Domain must not be more than 255 characters."],
    }


def test_delete_website_cascades_to_credentials(client, db_session, website, ftp_login, database_login):
    website_id = website.id

    res = client.delete(f"/api/websites/{website_id}")
    assert res.status_code == 204

    db_session.expire_all()
    assert db_session.query(FTPLogin).filter(FTPLogin.website_id == website_id).count() == 0
    assert db_session.query(DatabaseLogin).filter(DatabaseLogin.website_id == website_id).count() == 0
    assert client.get(f"/api/ftp/{website_id}").status_code == 404


def test_delete_missing_website(client):
    assert client.delete("/api/websites/999").status_code == 404


def test_website_id_outside_integer_range(client):
    res = client.get("/api/websites/99999999999999999999")

    assert res.status_code == 400
    assert "website_id" in res.json()["errors"]


def test_add_website_rejects_malformed_json(client):
    res = client.post("/api/websites", content=b"{name: Shop}", headers={"content-type": "application/json"})

    assert res.status_code == 400
    assert res.json()["message"] == "Malformed JSON body"
    assert client.get("/api/websites").json()["records"] == []
