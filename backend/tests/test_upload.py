import base64

from tests.factories import API


def data_uri(content: bytes, mime: str = "application/pdf") -> str:
    return f"data:{mime};base64,{base64.b64encode(content).decode()}"


def test_upload_writes_file(client, upload_dir):
    response = client.post(f"{API}/upload", json={"fileData": data_uri(b"%PDF-1.4 bill"), "fileName": "bill.pdf"})
    assert response.status_code == 201
    file_path = response.json()["filePath"]
    assert file_path.startswith("/uploads/bills/")
    assert file_path.endswith(".pdf")

    stored = upload_dir / "bills" / file_path.rsplit("/", 1)[-1]
    assert stored.read_bytes() == b"%PDF-1.4 bill"


def test_upload_names_are_unique(client):
    body = {"fileData": data_uri(b"same"), "fileName": "same.pdf"}
    first = client.post(f"{API}/upload", json=body).json()["filePath"]
    second = client.post(f"{API}/upload", json=body).json()["filePath"]
    assert first != second


def test_upload_requires_data_and_name(client):
    for body in ({"fileName": "a.pdf"}, {"fileData": data_uri(b"x")}, {}):
        response = client.post(f"{API}/upload", json=body)
        assert response.status_code == 400
        assert response.json() == {"message": "Missing file data or name"}


def test_upload_rejects_bad_base64(client):
    response = client.post(f"{API}/upload", json={"fileData": "data:application/pdf;base64,@@@", "fileName": "a.pdf"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid data URI"}
