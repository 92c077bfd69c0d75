import pytest

from bizform import crud
from tests.factories import (
    API, bank_payload, client_payload, contact_party_payload, create, exporter_payload,
    manufacturer_payload, size_payload,
)

MASTER_RESOURCES = [
    ("/exporter-data", "companies", exporter_payload, "companyName"),
    ("/bank-data", "banks", bank_payload, "bankName"),
    ("/client-data", "clients", client_payload, "city"),
    ("/manufacturer-data", "manufacturers", manufacturer_payload, "stuffingPermissionNumber"),
    ("/supplier-data", "suppliers", contact_party_payload, "gstNumber"),
    ("/transporter-data", "transporters", contact_party_payload, "contactPerson"),
    ("/pallet-data", "pallets", contact_party_payload, "contactNumber"),
    ("/size-data", "sizes", size_payload, "hsnCode"),
]


def test_create_bank_then_list(client):
    response = client.post(f"{API}/bank-data", json=bank_payload())
    assert response.status_code == 201
    created = response.json()
    assert isinstance(created["id"], str) and created["id"]
    assert created["isDeleted"] is False

    banks = client.get(f"{API}/bank-data").json()
    assert len(banks) == 1
    bank = banks[0]
    assert bank["id"] == created["id"]
    for key, value in bank_payload().items():
        assert bank[key] == value


@pytest.mark.parametrize("path,table,payload_factory,field", MASTER_RESOURCES)
def test_post_then_get_includes_record(client, path, table, payload_factory, field):
    first = create(client, path, payload_factory())
    second = create(client, path, payload_factory())
    assert first["id"] != second["id"]

    records = client.get(f"{API}{path}").json()
    assert [r["id"] for r in records] == [second["id"], first["id"]]
    assert all(r["isDeleted"] is False for r in records)
    assert records[0][field] == payload_factory()[field]


@pytest.mark.parametrize("path,table,payload_factory,field", MASTER_RESOURCES)
def test_missing_required_field_is_rejected(client, raw_db, path, table, payload_factory, field):
    payload = payload_factory()
    del payload[field]
    response = client.post(f"{API}{path}", json=payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Missing required fields"}

    falsy = payload_factory(**{field: ""})
    assert client.post(f"{API}{path}", json=falsy).status_code == 400

    assert raw_db.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0] == 0


@pytest.mark.parametrize("path,table,payload_factory,field", MASTER_RESOURCES)
def test_delete_is_soft(client, raw_db, path, table, payload_factory, field):
    record = create(client, path, payload_factory())

    response = client.delete(f"{API}{path}", params={"id": record["id"]})
    assert response.status_code == 200
    assert response.json()["message"].endswith("marked as deleted")

    assert client.get(f"{API}{path}").json() == []
    row = raw_db.execute(f"SELECT is_deleted FROM {table} WHERE id = ?", (int(record["id"]),)).fetchone()
    assert row is not None
    assert row["is_deleted"] == 1


def test_put_replaces_fields(client):
    bank = create(client, "/bank-data", bank_payload())
    update = bank_payload(bankName="XYZ Bank", swiftCode="XYZW")

    response = client.put(f"{API}/bank-data", params={"id": bank["id"]}, json=update)
    assert response.status_code == 200
    assert response.json() == {**update, "id": bank["id"]}

    stored = client.get(f"{API}/bank-data").json()[0]
    assert stored["bankName"] == "XYZ Bank"
    assert stored["swiftCode"] == "XYZW"


def test_put_on_missing_id_is_a_noop(client, raw_db):
    response = client.put(f"{API}/bank-data", params={"id": "999"}, json=bank_payload())
    assert response.status_code == 200
    assert response.json()["id"] == "999"
    assert raw_db.execute("SELECT COUNT(*) FROM banks").fetchone()[0] == 0


def test_put_with_non_numeric_id_is_a_noop(client, raw_db):
    create(client, "/bank-data", bank_payload())
    response = client.put(f"{API}/bank-data", params={"id": "abc"}, json=bank_payload(bankName="Other"))
    assert response.status_code == 200
    assert client.get(f"{API}/bank-data").json()[0]["bankName"] == "ABC Bank"


@pytest.mark.parametrize("huge_id", ["99999999999999999999", "-99999999999999999999", str(2 ** 63)])
def test_out_of_range_id_is_a_noop(client, huge_id):
    create(client, "/bank-data", bank_payload())

    response = client.put(f"{API}/bank-data", params={"id": huge_id}, json=bank_payload(bankName="Other"))
    assert response.status_code == 200
    assert response.json()["id"] == huge_id

    response = client.delete(f"{API}/bank-data", params={"id": huge_id})
    assert response.status_code == 200
    assert response.json() == {"message": "Bank marked as deleted"}

    banks = client.get(f"{API}/bank-data").json()
    assert [b["bankName"] for b in banks] == ["ABC Bank"]


def test_put_validates_required_fields(client):
    bank = create(client, "/bank-data", bank_payload())
    response = client.put(f"{API}/bank-data", params={"id": bank["id"]}, json={"bankName": "Only"})
    assert response.status_code == 400
    assert response.json() == {"message": "Missing required fields"}


def test_put_and_delete_require_id(client):
    response = client.put(f"{API}/bank-data", json=bank_payload())
    assert response.status_code == 400
    assert response.json() == {"message": "Bank ID is required"}

    response = client.delete(f"{API}/bank-data")
    assert response.status_code == 400
    assert response.json() == {"message": "Bank ID is required"}

    response = client.delete(f"{API}/exporter-data")
    assert response.json() == {"message": "Company ID is required"}


def test_delete_missing_id_reports_success(client):
    response = client.delete(f"{API}/client-data", params={"id": "12345"})
    assert response.status_code == 200
    assert response.json() == {"message": "Client marked as deleted"}


def test_non_object_body_is_rejected(client):
    response = client.post(f"{API}/bank-data", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request body"}


def test_wrong_field_type_is_rejected(client, raw_db):
    response = client.post(f"{API}/bank-data", json=bank_payload(bankName={"nested": True}))
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid bank data"}
    assert raw_db.execute("SELECT COUNT(*) FROM banks").fetchone()[0] == 0


def test_manufacturer_permission_date_keeps_calendar_day(client, raw_db):
    created = create(
        client, "/manufacturer-data",
        manufacturer_payload(stuffingPermissionDate="2024-03-15T23:30:00.000Z"),
    )
    assert created["stuffingPermissionDate"] == "2024-03-15"
    row = raw_db.execute("SELECT stuffing_permission_date FROM manufacturers").fetchone()
    assert row[0] == "2024-03-15"


def test_size_numbers_round_trip(client):
    create(client, "/size-data", size_payload())
    size = client.get(f"{API}/size-data").json()[0]
    assert size["sqmPerBox"] == pytest.approx(1.44)
    assert size["boxWeight"] == pytest.approx(28)


def test_persistence_error_becomes_500(client, monkeypatch):
    async def broken(db):
        raise RuntimeError("database is gone")

    monkeypatch.setattr(crud.bank, "list_active", broken)
    response = client.get(f"{API}/bank-data")
    assert response.status_code == 500
    assert response.json() == {"message": "Error fetching banks"}


def test_unknown_route_uses_message_body(client):
    response = client.get(f"{API}/no-such-data")
    assert response.status_code == 404
    assert "message" in response.json()
