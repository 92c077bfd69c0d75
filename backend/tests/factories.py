"""测试用的请求体构造"""
from bizform.core.config import settings

API = settings.API_V2_STR


def bank_payload(**overrides):
    payload = {
        "bankName": "ABC Bank",
        "bankAddress": "X",
        "accountNumber": "123",
        "swiftCode": "ABCD",
        "ifscCode": "IFSC1",
    }
    payload.update(overrides)
    return payload


def client_payload(**overrides):
    payload = {
        "companyName": "Gulf Tiles LLC",
        "person": "Omar",
        "contactNumber": "+971500000",
        "address": "Port Road 4",
        "city": "Dubai",
        "country": "UAE",
        "pinCode": "00000",
    }
    payload.update(overrides)
    return payload


def contact_party_payload(**overrides):
    payload = {
        "companyName": "Morbi Freight",
        "gstNumber": "24ABCDE1234F1Z5",
        "contactPerson": "Ravi",
        "contactNumber": "9800000000",
    }
    payload.update(overrides)
    return payload


def manufacturer_payload(**overrides):
    payload = {
        "companyName": "Sunrise Ceramics",
        "contactPerson": "Mehul",
        "address": "8A National Highway, Morbi",
        "gstNumber": "24AAACS1111A1Z1",
        "stuffingPermissionNumber": "SP/2024/17",
        "stuffingPermissionDate": "2024-03-15",
        "pinCode": "363642",
    }
    payload.update(overrides)
    return payload


def exporter_payload(**overrides):
    payload = {
        "companyName": "Hemith Exports",
        "contactPerson": "Asha",
        "address": "Lakhdhirpur Road, Morbi",
        "phoneNumber": "02822000000",
        "iecNumber": "IEC1234567",
        "gstNumber": "24AAAAA0000A1Z5",
    }
    payload.update(overrides)
    return payload


def size_payload(**overrides):
    payload = {
        "size": "600x1200",
        "sqmPerBox": 1.44,
        "boxWeight": 28,
        "purchasePrice": 210,
        "salesPrice": 8.5,
        "hsnCode": "69072100",
        "palletDetails": "26 boxes per pallet",
    }
    payload.update(overrides)
    return payload


def create(client, path, payload):
    response = client.post(f"{API}{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()
